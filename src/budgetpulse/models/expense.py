"""SQLModel definition for expense entries."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..constants.categories import DEFAULT_CATEGORY
from ._ids import new_id, utcnow


class Expense(SQLModel, table=True):
    """A single expense recorded by a user."""

    __tablename__: ClassVar[str] = "expense"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    user_id: str = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=120)
    amount: float = Field(nullable=False, description="Always positive")
    description: str = Field(default="", max_length=255)
    category: str = Field(default=DEFAULT_CATEGORY, max_length=32)
    color: Optional[str] = Field(default=None, max_length=7)
    date: datetime = Field(default_factory=utcnow, nullable=False, index=True)
