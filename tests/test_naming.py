"""Tests for component name splitting and naming conventions."""

import pytest

from codemate.naming import (
    name_forms,
    split_words,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title,
)


# --- split_words ---

@pytest.mark.parametrize("name", ["user card", "UserCard", "userCard", "user-card", "user_card", "  User   Card "])
def test_split_words_handles_common_spellings(name):
    assert split_words(name) == ["user", "card"]


def test_split_words_keeps_acronym_runs_together():
    assert split_words("HTTPServer") == ["http", "server"]


def test_split_words_separates_digits():
    assert split_words("Widget2Panel") == ["widget", "2", "panel"]


def test_split_words_all_caps_is_one_word():
    assert split_words("API") == ["api"]


def test_split_words_without_alphanumerics_is_empty():
    assert split_words("--- !!") == []


# --- conventions ---

def test_pascal_case():
    assert to_pascal_case("user card") == "UserCard"


def test_camel_case():
    assert to_camel_case("UserCard") == "userCard"


def test_camel_case_of_empty_name():
    assert to_camel_case("") == ""


def test_kebab_case():
    assert to_kebab_case("UserCard") == "user-card"


def test_snake_case():
    assert to_snake_case("user-card") == "user_card"


def test_title():
    assert to_title("user_card") == "User Card"


def test_name_forms_covers_every_placeholder():
    assert name_forms("order summary") == {
        "pascal": "OrderSummary",
        "camel": "orderSummary",
        "kebab": "order-summary",
        "snake": "order_summary",
        "title": "Order Summary",
    }


# --- non-ASCII letters ---

def test_split_words_keeps_accented_letters():
    assert split_words("Über Card") == ["über", "card"]


def test_split_words_keeps_accented_camel_humps():
    assert split_words("caféÉclair") == ["café", "éclair"]


def test_split_words_normalizes_decomposed_accents():
    assert split_words("Cafe\u0301") == ["caf\u00e9"]


def test_accented_name_in_every_convention():
    assert name_forms("Über Card") == {
        "pascal": "ÜberCard",
        "camel": "überCard",
        "kebab": "über-card",
        "snake": "über_card",
        "title": "Über Card",
    }
