"""
Centralized expense category definitions for dropdowns and list rows.
Anything outside EXPENSE_CATEGORIES is displayed as the default category.
"""

from __future__ import annotations

import random
from typing import Optional

DEFAULT_CATEGORY = "Uncategorized"

EXPENSE_CATEGORIES = [
    "Housing",
    "Food",
    "Transportation",
    "Utilities",
    "Entertainment",
    "Healthcare",
    "Education",
    "Shopping",
    DEFAULT_CATEGORY,
]

# Swatch for expenses stored without a color
CATEGORY_COLORS = {
    "Housing": "#FF5733",
    "Food": "#33FF57",
    "Transportation": "#3357FF",
    "Utilities": "#FF33A8",
    "Entertainment": "#33FFF5",
    "Healthcare": "#FFD133",
    "Education": "#8C33FF",
    "Shopping": "#FF8C33",
    DEFAULT_CATEGORY: "#AAAAAA",
}

# Random swatch given to a new expense
ENTRY_PALETTE = [
    "#FF5733",
    "#33FF57",
    "#3357FF",
    "#FF33A8",
    "#33FFF5",
    "#FFD133",
    "#8C33FF",
    "#FF8C33",
]

# Income swatches follow list position instead of being stored
INCOME_PALETTE = [
    "#4CAF50",
    "#2196F3",
    "#FF9800",
    "#9C27B0",
    "#E91E63",
    "#F44336",
    "#3F51B5",
    "#009688",
]


def normalize_category(value: Optional[str]) -> str:
    """Return ``value`` when it is a known category, else the default."""

    if value and value in EXPENSE_CATEGORIES:
        return value
    return DEFAULT_CATEGORY


def category_color(value: Optional[str]) -> str:
    return CATEGORY_COLORS[normalize_category(value)]


def expense_color(color: Optional[str], category: Optional[str]) -> str:
    return color or category_color(category)


def income_color(color: Optional[str], index: int) -> str:
    """Stored color, else the palette slot for the row at ``index``."""

    return color or INCOME_PALETTE[index % len(INCOME_PALETTE)]


def random_entry_color(rng: random.Random | None = None) -> str:
    """Pick a palette color for a newly created expense."""

    chooser = rng or random
    return chooser.choice(ENTRY_PALETTE)
