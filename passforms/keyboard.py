"""
passforms.keyboard

Static keyboard data:
- KEYBOARD_SEQUENCES: physical key runs (rows, diagonals, alphabet) joined into
  one string, used for substring checks by the evaluator
- LAYOUT_EN_RU / LAYOUT_RU_EN: QWERTY <-> JCUKEN key-position pairs
- CASE_PAIRS: lower/upper letter pairs (Latin and Cyrillic)

Everything here is built once at import and never mutated.
"""

import string
from typing import Dict

KEYBOARD_SEQUENCES = (
    "`1234567890-=\\"                        # second row, [Shift] off
    "~!@#$%^&*()_+|"                         # second row, [Shift] on
    "qwertyuiop[]asdfghjkl;'zxcvbnm,./"      # letter rows with punctuation
    "QWERTYUIOP{}ASDFGHJKL:\"ZXCVBNM<>?"
    "qwertyuiopasdfghjklzxcvbnm"             # letter rows
    "QWERTYUIOPASDFGHJKLZXCVBNM"
    "qazwsxedcrfvtgbyhnujmikolp"             # diagonals
    "QAZWSXEDCRFVTGBYHNUJMIKOLP"
    + string.ascii_lowercase                 # alphabet
    + string.ascii_uppercase
)

# Same physical key, en glyph -> ru glyph. Keys producing the same glyph in
# both layouts (digits, space, ! % * ( ) - = _ + \) are left out on purpose:
# they pass through unchanged.
_EN_CAPS_OFF = "`qwertyuiop[]asdfghjkl;'zxcvbnm,./"
_RU_CAPS_OFF = "ёйцукенгшщзхъфывапролджэячсмитьбю."
_EN_CAPS_ON = "~@#$^&|QWERTYUIOP{}ASDFGHJKL:\"ZXCVBNM<>?"
_RU_CAPS_ON = "Ё\"№;:?/ЙЦУКЕНГШЩЗХЪФЫВАПРОЛДЖЭЯЧСМИТЬБЮ,"

LAYOUT_EN_RU: Dict[str, str] = dict(
    zip(_EN_CAPS_OFF + _EN_CAPS_ON, _RU_CAPS_OFF + _RU_CAPS_ON)
)
LAYOUT_RU_EN: Dict[str, str] = {ru: en for en, ru in LAYOUT_EN_RU.items()}

_CYRILLIC_LOWER = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"
_CYRILLIC_UPPER = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"

CASE_PAIRS: Dict[str, str] = dict(
    zip(string.ascii_lowercase + _CYRILLIC_LOWER, string.ascii_uppercase + _CYRILLIC_UPPER)
)

# str.translate tables
EN_TO_RU = str.maketrans(LAYOUT_EN_RU)
RU_TO_EN = str.maketrans(LAYOUT_RU_EN)
SWAP_CASE = str.maketrans({**CASE_PAIRS, **{up: low for low, up in CASE_PAIRS.items()}})
