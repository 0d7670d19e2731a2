"""
passforms.errors
Exceptions raised by the generator and the layout deriver.
"""


class PasswordError(ValueError):
    """Base class for every error passforms reports to its caller."""


class InvalidLength(PasswordError):
    """Requested password length is below the minimum."""


class InvalidAlphabet(PasswordError):
    """Alphabet has too few unique characters to generate from."""


class GenerationExhausted(PasswordError):
    """No candidate passed the quality check within the attempt bound."""


class UnsupportedLayout(PasswordError):
    """Keyboard layout (or layout pair) is not one of en/ru."""
