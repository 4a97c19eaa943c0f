"""User model backing sign-in sessions."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ._ids import new_id, utcnow


class User(SQLModel, table=True):
    """Registered account holder identified by email."""

    __tablename__: ClassVar[str] = "user"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    email: str = Field(nullable=False, unique=True, index=True, max_length=255)
    password_hash: str = Field(nullable=False, max_length=255)
    name: str = Field(default="", max_length=120, description="Display name given at sign-up")
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    last_login: Optional[datetime] = Field(default=None)

    # Password recovery; only the hash of the emailed token is stored.
    reset_token_hash: Optional[str] = Field(default=None, max_length=64, index=True)
    reset_expires_at: Optional[datetime] = Field(default=None)
