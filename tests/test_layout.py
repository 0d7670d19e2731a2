import pytest

from passforms.errors import UnsupportedLayout
from passforms.keyboard import CASE_PAIRS, LAYOUT_EN_RU, LAYOUT_RU_EN
from passforms.layout import convert_layout, invert_case, keyboard_forms

EN_DOMAIN = "".join(LAYOUT_EN_RU)
RU_DOMAIN = "".join(LAYOUT_RU_EN)

def test_layout_table_is_one_to_one():
    assert len(LAYOUT_EN_RU) == 74
    assert len(set(LAYOUT_EN_RU.values())) == len(LAYOUT_EN_RU)
    assert len(LAYOUT_RU_EN) == len(LAYOUT_EN_RU)

def test_convert_layout():
    assert convert_layout("ghbdtn", "en", "ru") == "привет"
    assert convert_layout("привет", "ru", "en") == "ghbdtn"
    assert convert_layout("Gfhjkm!", "en", "ru") == "Пароль!"

def test_unmapped_characters_pass_through():
    assert convert_layout("123 !%*", "en", "ru") == "123 !%*"
    assert convert_layout("日本", "ru", "en") == "日本"

def test_round_trips():
    assert convert_layout(convert_layout(EN_DOMAIN, "en", "ru"), "ru", "en") == EN_DOMAIN
    assert convert_layout(convert_layout(RU_DOMAIN, "ru", "en"), "en", "ru") == RU_DOMAIN

def test_unsupported_pairs():
    with pytest.raises(UnsupportedLayout):
        convert_layout("abc", "en", "en")
    with pytest.raises(UnsupportedLayout):
        convert_layout("abc", "de", "en")

def test_invert_case():
    assert invert_case("abCD1%") == "ABcd1%"
    assert invert_case("фиСВёЁ") == "ФИсвЁё"
    all_letters = "".join(CASE_PAIRS) + "".join(CASE_PAIRS.values())
    assert invert_case(invert_case(all_letters)) == all_letters
    assert invert_case(invert_case("Tr0ub4x! привет")) == "Tr0ub4x! привет"

def test_keyboard_forms_en():
    assert keyboard_forms("abCD1%", "en") == ["фиСВ1%", "abCD1%", "ФИсв1%", "ABcd1%"]

def test_keyboard_forms_ru():
    forms = keyboard_forms("фиСВ1%")
    assert forms == ["abCD1%", "фиСВ1%", "ABcd1%", "ФИсв1%"]

def test_keyboard_forms_always_four():
    for lang in ("en", "ru"):
        assert len(keyboard_forms("Tr0ub4x!", lang)) == 4
        assert len(keyboard_forms("", lang)) == 4

def test_keyboard_forms_unsupported_lang():
    with pytest.raises(UnsupportedLayout):
        keyboard_forms("abc", "de")
