"""Profile repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.profile import Profile


class ProfileRepository(Protocol):
    def get(self, user_id: str) -> Optional[Profile]:
        """Return the stored profile row, if any."""
        ...

    def upsert(self, *, user_id: str, name: str, currency: str) -> Profile:
        """Insert or replace the profile row and stamp ``updated_at``."""
        ...
