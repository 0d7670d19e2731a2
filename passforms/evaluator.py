"""
passforms.evaluator

Password quality check. A password is bad when:
- its length is < 6 or > 20, or it has characters outside \\x20-\\x7e
  (non-ASCII is rejected, it causes charset trouble)
- it lacks digits or latin letters (each check can be switched off)
- it is a run of keys as on the keyboard (123456, qwerty, abcdef), forwards
  or backwards
- it has an even length and both halves are such runs (qazxsw), which also
  catches repeated (werwer) and mirrored (123321, qweewq) sequences
- less than 46% of its characters are unique (wwwfff, 000000)

evaluate(password) reports which rule failed; assess(password) is the
plain yes/no answer.
"""

import re
from typing import Dict, Optional

from .keyboard import KEYBOARD_SEQUENCES

MIN_LENGTH = 6
MAX_LENGTH = 20
MIN_UNIQUENESS = 0.46

_PRINTABLE_ASCII = re.compile(r"[\x20-\x7e]*")
_DIGIT = re.compile(r"[0-9]")
_LETTER = re.compile(r"[a-zA-Z]")

EXPLANATIONS = {
    "length": f"Length must be {MIN_LENGTH}-{MAX_LENGTH} characters.",
    "charset": "Contains characters outside printable ASCII (\\x20-\\x7e).",
    "digits": "Contains no digits.",
    "letters": "Contains no latin letters.",
    "sequence": "Is a run of keys as on the keyboard (e.g. 123456, qwerty, abcdef).",
    "halves": "Both halves are keyboard runs (e.g. qazxsw, werwer, 123321).",
    "uniqueness": f"Less than {MIN_UNIQUENESS:.0%} of the characters are unique.",
}


def is_keyboard_sequence(s: str) -> bool:
    """True if s, read forwards or backwards, is a substring of the key-run table."""
    return s in KEYBOARD_SEQUENCES or s[::-1] in KEYBOARD_SEQUENCES


def uniqueness_ratio(s: str) -> float:
    if not s:
        return 0.0
    return len(set(s)) / len(s)


def _has_sequence_halves(password: str) -> bool:
    # only for even lengths; odd lengths are never split
    n = len(password)
    if n <= 5 or n % 2:
        return False
    half = n // 2
    return is_keyboard_sequence(password[:half]) and is_keyboard_sequence(password[half:])


def _failed_rule(password: str, check_digits: bool, check_letters: bool) -> Optional[str]:
    if not MIN_LENGTH <= len(password) <= MAX_LENGTH:
        return "length"
    if not _PRINTABLE_ASCII.fullmatch(password):
        return "charset"
    if check_digits and not _DIGIT.search(password):
        return "digits"
    if check_letters and not _LETTER.search(password):
        return "letters"
    if is_keyboard_sequence(password):
        return "sequence"
    if _has_sequence_halves(password):
        return "halves"
    if uniqueness_ratio(password) < MIN_UNIQUENESS:
        return "uniqueness"
    return None


def evaluate(password: str, check_digits: bool = True, check_letters: bool = True) -> Dict:
    """
    Run the quality rules in order and stop at the first failure.

    Returns a dict:
    {
        "password": password,
        "ok": bool,
        "reason": str | None,     # name of the failed rule
        "explanation": str,
        "uniqueness": float,      # distinct chars / length
    }
    """
    reason = _failed_rule(password, check_digits, check_letters)
    return {
        "password": password,
        "ok": reason is None,
        "reason": reason,
        "explanation": EXPLANATIONS.get(reason, "No weaknesses detected."),
        "uniqueness": uniqueness_ratio(password),
    }


def assess(password: str, check_digits: bool = True, check_letters: bool = True) -> bool:
    """Return True if the password is good, False if it is weak."""
    return _failed_rule(password, check_digits, check_letters) is None
