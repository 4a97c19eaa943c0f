"""Profile repository backed by SQLModel."""

from __future__ import annotations

from typing import Optional

from ...constants.currencies import CURRENCY_CODES, DEFAULT_CURRENCY
from ...models._ids import utcnow
from ...models.profile import Profile
from ..database import SessionFactory


class SQLModelProfileRepository:
    """SQLModel-based profile repository."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def get(self, user_id: str) -> Optional[Profile]:
        with self.session_factory() as session:
            profile = session.get(Profile, user_id)
            if profile:
                session.expunge(profile)
            return profile

    def upsert(self, *, user_id: str, name: str, currency: str) -> Profile:
        code = (currency or DEFAULT_CURRENCY).upper()
        if code not in CURRENCY_CODES:
            raise ValueError(f"Unsupported currency: {currency}")
        with self.session_factory() as session:
            profile = session.get(Profile, user_id)
            if profile is None:
                profile = Profile(id=user_id)
            profile.name = name
            profile.currency = code
            profile.updated_at = utcnow()
            session.add(profile)
            session.commit()
            session.refresh(profile)
            session.expunge(profile)
            return profile


__all__ = ["SQLModelProfileRepository"]
