"""Currency and category lookup tables."""

from __future__ import annotations

import random

from budgetpulse.constants.categories import (
    DEFAULT_CATEGORY,
    ENTRY_PALETTE,
    EXPENSE_CATEGORIES,
    INCOME_PALETTE,
    category_color,
    expense_color,
    income_color,
    normalize_category,
    random_entry_color,
)
from budgetpulse.constants.currencies import (
    CURRENCIES,
    CURRENCY_CODES,
    currency_symbol,
    format_amount,
)


def test_currency_table_has_twenty_unique_codes():
    assert len(CURRENCIES) == 20
    assert len(CURRENCY_CODES) == 20


def test_currency_symbols():
    assert currency_symbol("EUR") == "€"
    assert currency_symbol("inr") == "₹"
    assert currency_symbol("MXN") == "Mex$"
    assert currency_symbol("SEK") == currency_symbol("NOK") == "kr"


def test_unknown_or_missing_currency_defaults_to_dollar():
    assert currency_symbol(None) == "$"
    assert currency_symbol("") == "$"
    assert currency_symbol("XYZ") == "$"


def test_format_amount():
    assert format_amount(1200) == "$1200.00"
    assert format_amount(70.5, "GBP") == "£70.50"
    assert format_amount(-200, "USD") == "$-200.00"


def test_unknown_category_falls_back():
    assert normalize_category("Housing") == "Housing"
    assert normalize_category("Pets") == DEFAULT_CATEGORY
    assert normalize_category(None) == DEFAULT_CATEGORY
    assert category_color("Pets") == category_color(DEFAULT_CATEGORY)
    assert EXPENSE_CATEGORIES[-1] == DEFAULT_CATEGORY


def test_random_entry_color_comes_from_palette():
    rng = random.Random(7)
    colors = {random_entry_color(rng) for _ in range(50)}
    assert colors <= set(ENTRY_PALETTE)


def test_expense_swatch_falls_back_to_category_color():
    assert expense_color("#123456", "Housing") == "#123456"
    assert expense_color(None, "Housing") == "#FF5733"
    assert expense_color(None, "Pets") == "#AAAAAA"


def test_income_swatch_cycles_through_palette():
    assert income_color(None, 0) == "#4CAF50"
    assert income_color(None, 1) == "#2196F3"
    assert income_color(None, len(INCOME_PALETTE)) == INCOME_PALETTE[0]
    assert income_color("#000000", 3) == "#000000"
