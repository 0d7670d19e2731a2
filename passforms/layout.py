"""
passforms.layout

Derived forms of a password, so a login can succeed regardless of the active
keyboard layout (en/ru) and the [Caps Lock] state.

Example, password typed on the en layout:
  en, [Caps Lock] off: abCD1%
  en, [Caps Lock] on:  ABcd1%
  ru, [Caps Lock] off: фиСВ1%
  ru, [Caps Lock] on:  ФИсв1%
"""

import logging
from typing import List

from .errors import UnsupportedLayout
from .keyboard import EN_TO_RU, RU_TO_EN, SWAP_CASE

log = logging.getLogger(__name__)

LAYOUTS = ("en", "ru")

_TABLES = {
    ("en", "ru"): EN_TO_RU,
    ("ru", "en"): RU_TO_EN,
}


def convert_layout(text: str, source: str, target: str) -> str:
    """
    Retype text as if the same keys were pressed under the target layout.
    Characters without a counterpart are left as they are.
    """
    try:
        table = _TABLES[(source, target)]
    except KeyError:
        raise UnsupportedLayout(
            f"Unsupported input and output keyboard layouts: {source!r} -> {target!r}"
        ) from None
    return text.translate(table)


def invert_case(text: str) -> str:
    """Swap lower and upper case of Latin and Cyrillic letters ([Caps Lock] toggled)."""
    return text.translate(SWAP_CASE)


def keyboard_forms(password: str, lang: str = "ru") -> List[str]:
    """
    Return the four derived forms of password, in this order:
    lang -> other layout, other layout -> lang, and the case-inverted
    versions of those two.
    """
    if lang not in LAYOUTS:
        raise UnsupportedLayout(f"Unsupported keyboard layout: {lang!r}")
    other = "ru" if lang == "en" else "en"

    forms = [
        convert_layout(password, lang, other),
        convert_layout(password, other, lang),
    ]
    forms += [invert_case(f) for f in forms]
    log.debug("derived %d keyboard forms (lang=%s)", len(forms), lang)
    return forms
