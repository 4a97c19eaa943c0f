"""Per-user display preferences."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from sqlmodel import Field, SQLModel

from ..constants.currencies import DEFAULT_CURRENCY
from ._ids import utcnow


class Profile(SQLModel, table=True):
    """Display name and currency preference, keyed by the owning user id."""

    __tablename__: ClassVar[str] = "profile"

    id: str = Field(foreign_key="user.id", primary_key=True, max_length=32)
    name: str = Field(default="", max_length=120)
    currency: str = Field(default=DEFAULT_CURRENCY, max_length=3, description="ISO-4217 currency code")
    updated_at: datetime = Field(default_factory=utcnow, nullable=False)
