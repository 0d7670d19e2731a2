# passforms/config.py
"""
Simple settings persistence for the passforms CLI.
Settings saved as JSON in $PASSFORMS_HOME/config.json, %APPDATA%/passforms/config.json (Windows)
or ~/.passforms/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 8,
    "alphabet": None,  # if None, generator.DEFAULT_ALPHABET is used
    "copies": 1,
    "lang": "ru",
}

def _config_dir() -> str:
    home = os.getenv("PASSFORMS_HOME")
    appdata = os.getenv("APPDATA")
    if home:
        d = home
    elif appdata:
        d = os.path.join(appdata, "passforms")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passforms")
    os.makedirs(d, exist_ok=True)
    return d

def config_path() -> str:
    return os.path.join(_config_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        log.warning("ignoring config %s: expected a JSON object, got %s", p, type(data).__name__)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def set_value(cfg: Dict[str, Any], key: str, raw: str) -> Dict[str, Any]:
    """
    Store a value given as a string (from the command line) under key,
    converted to the type of the default. Unknown keys raise KeyError.
    """
    if key not in DEFAULTS:
        raise KeyError(key)
    default = DEFAULTS[key]
    if isinstance(default, int):
        value: Any = int(raw)
    elif default is None and raw.lower() in ("", "none", "null"):
        value = None
    else:
        value = raw
    cfg[key] = value
    return cfg
