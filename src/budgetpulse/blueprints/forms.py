"""Form binding and validation shared by the entry dialogs."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

AMOUNT_ERROR = "Amount must be a positive number"
NAME_REQUIRED = "Name is required"


@dataclass(slots=True)
class BaseForm:
    """Holds raw request strings and accumulated per-field errors."""

    FIELDS: ClassVar[tuple[str, ...]] = ()

    errors: dict[str, list[str]] = field(default_factory=dict, init=False)
    raw_data: dict[str, str] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]):
        """Create a form populated from request data."""

        form = cls()
        form.load(data)
        return form

    def load(self, data: Mapping[str, Any]) -> None:
        """Bind incoming mapping data to the form state."""

        self.raw_data = {}
        for key in self.FIELDS:
            value = data.get(key)
            if value is None:
                value_str = ""
            elif isinstance(value, str):
                value_str = value
            else:
                value_str = str(value)
            self.raw_data[key] = value_str

    def validate(self) -> bool:  # pragma: no cover - overridden
        raise NotImplementedError

    def value(self, key: str) -> str:
        return self.raw_data.get(key, "")

    def first_error(self) -> Optional[str]:
        for messages in self.errors.values():
            if messages:
                return messages[0]
        return None

    def _add_error(self, field: str, message: str) -> None:
        """Accumulate validation errors for a specific field."""

        self.errors.setdefault(field, []).append(message)


def parse_positive_amount(raw: str) -> Optional[float]:
    """Return the amount as a float when it is a finite number above zero."""

    try:
        amount = float(raw.strip())
    except (AttributeError, TypeError, ValueError):
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


@dataclass(slots=True)
class EntryForm(BaseForm):
    """Name, amount and description shared by income and expense dialogs."""

    FIELDS: ClassVar[tuple[str, ...]] = ("name", "amount", "description")

    name: str = ""
    amount: Optional[float] = None
    description: str = ""

    def validate(self) -> bool:
        self.errors.clear()

        self.name = self.value("name").strip()
        if not self.name:
            self._add_error("name", NAME_REQUIRED)
        elif len(self.name) > 120:
            self._add_error("name", "Name must be 120 characters or fewer")

        self.amount = parse_positive_amount(self.value("amount"))
        if self.amount is None:
            self._add_error("amount", AMOUNT_ERROR)

        self.description = self.value("description").strip()
        if len(self.description) > 255:
            self._add_error("description", "Description must be 255 characters or fewer")

        return not self.errors
