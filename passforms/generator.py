"""
passforms.generator
Password generator: random candidates from an alphabet, retried until one
passes the quality check.
"""

import logging
import random
from secrets import SystemRandom
from typing import Optional

from .errors import GenerationExhausted, InvalidAlphabet, InvalidLength
from .evaluator import assess

log = logging.getLogger(__name__)

# 0, O, 1 and l are left out: hard to tell apart visually
DEFAULT_ALPHABET = (
    "23456789"
    "abcdefghijkmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNPQRSTUVWXYZ"
)
MIN_LENGTH = 6
MIN_ALPHABET = 36  # 36 ** 6 = 2 176 782 336 combinations minimum
MAX_ATTEMPTS = 100

_sysrand = SystemRandom()


def dedupe_alphabet(alphabet: str) -> str:
    """Unique characters of alphabet, in first-seen order."""
    return "".join(dict.fromkeys(alphabet))


def generate(
    length: int = 8,
    alphabet: str = DEFAULT_ALPHABET,
    check_digits: bool = True,
    check_letters: bool = True,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a password that passes evaluator.assess().

    Raises InvalidLength for length < 6, InvalidAlphabet for fewer than 36
    unique characters and GenerationExhausted when 100 candidates in a row
    were rejected.
    """
    if length < MIN_LENGTH:
        raise InvalidLength(f"Minimum length of password is {MIN_LENGTH} chars, {length} given")

    chars = dedupe_alphabet(alphabet)
    if len(chars) < MIN_ALPHABET:
        raise InvalidAlphabet(
            f"Minimum size of alphabet is {MIN_ALPHABET} unique chars (e.g. [a-z0-9]), {len(chars)} given"
        )

    rng = rng or _sysrand
    for attempt in range(1, MAX_ATTEMPTS + 1):
        password = "".join(rng.choice(chars) for _ in range(length))
        if assess(password, check_digits=check_digits, check_letters=check_letters):
            log.debug("accepted candidate after %d attempt(s)", attempt)
            return password

    log.warning("no acceptable password after %d attempts (length=%d, alphabet=%d chars)",
                MAX_ATTEMPTS, length, len(chars))
    raise GenerationExhausted(
        f"No acceptable password of length {length} after {MAX_ATTEMPTS} attempts"
    )
