from pantry_recipes.app.services.ingredients_service import normalize_ingredient_name
from pantry_recipes.app.services.text_utils import (
    collapse_whitespace,
    split_list_items,
    split_sentences,
    title_case,
)


def test_title_case():
    assert title_case("extra-virgin olive oil.") == "Extra-Virgin Olive Oil"
    assert title_case("  GREEN   onions...  ") == "Green Onions"
    assert title_case("...") == ""
    assert title_case("") == ""


def test_split_sentences():
    assert split_sentences("Cook pasta. Add eggs. Mix well.") == ["Cook pasta.", "Add eggs.", "Mix well."]
    assert split_sentences("Is it done? Yes! 5 more minutes.") == ["Is it done?", "Yes!", "5 more minutes."]
    assert split_sentences("no boundary here. lower case next") == ["no boundary here. lower case next"]
    assert split_sentences("") == []


def test_split_list_items():
    assert split_list_items("a, b;c ,, ; d") == ["a", "b", "c", "d"]
    assert split_list_items("") == []


def test_collapse_whitespace():
    assert collapse_whitespace("  a \t b\n c ") == "a b c"


def test_normalize_ingredient_name():
    assert normalize_ingredient_name("  olive   OIL ") == "Olive Oil"
    assert normalize_ingredient_name("sun-dried tomato") == "Sun-Dried Tomato"
    assert normalize_ingredient_name("   ") == ""
    assert normalize_ingredient_name(None) == ""
