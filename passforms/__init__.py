"""
passforms: password quality check, generator and keyboard-layout forms.
"""

from .errors import (
    GenerationExhausted,
    InvalidAlphabet,
    InvalidLength,
    PasswordError,
    UnsupportedLayout,
)
from .evaluator import assess, evaluate
from .generator import DEFAULT_ALPHABET, generate
from .layout import convert_layout, invert_case, keyboard_forms

__all__ = [
    "assess",
    "evaluate",
    "generate",
    "DEFAULT_ALPHABET",
    "keyboard_forms",
    "convert_layout",
    "invert_case",
    "PasswordError",
    "InvalidLength",
    "InvalidAlphabet",
    "GenerationExhausted",
    "UnsupportedLayout",
]
