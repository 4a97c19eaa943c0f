"""User repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.user import User


class UserRepository(Protocol):
    def get_by_id(self, user_id: str) -> Optional[User]:
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def get_by_reset_token_hash(self, token_hash: str) -> Optional[User]:
        ...

    def create(self, user: User) -> User:
        ...

    def update(self, user: User) -> User:
        ...
