"""Income dialog and profile forms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ...constants.currencies import CURRENCY_CODES, DEFAULT_CURRENCY
from ..forms import BaseForm, EntryForm


@dataclass(slots=True)
class IncomeForm(EntryForm):
    """Income input prior to validation."""


@dataclass(slots=True)
class ProfileForm(BaseForm):
    FIELDS: ClassVar[tuple[str, ...]] = ("name", "currency")

    name: str = ""
    currency: str = DEFAULT_CURRENCY

    def validate(self) -> bool:
        self.errors.clear()
        self.name = self.value("name").strip()
        if len(self.name) > 120:
            self._add_error("name", "Name must be 120 characters or fewer")
        currency = (self.value("currency").strip() or DEFAULT_CURRENCY).upper()
        if currency not in CURRENCY_CODES:
            self._add_error("currency", "Choose one of the listed currencies")
        else:
            self.currency = currency
        return not self.errors
