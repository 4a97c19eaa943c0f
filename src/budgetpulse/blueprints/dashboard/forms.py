"""Expense dialog form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ...constants.categories import DEFAULT_CATEGORY, EXPENSE_CATEGORIES
from ..forms import EntryForm


@dataclass(slots=True)
class ExpenseForm(EntryForm):
    """Expense input prior to validation."""

    FIELDS: ClassVar[tuple[str, ...]] = ("name", "amount", "description", "category")

    category: str = DEFAULT_CATEGORY

    def validate(self) -> bool:
        EntryForm.validate(self)
        category = self.value("category").strip()
        if not category:
            self.category = DEFAULT_CATEGORY
        elif category in EXPENSE_CATEGORIES:
            self.category = category
        else:
            self._add_error("category", "Choose one of the listed categories")
        return not self.errors
