"""User repository backed by SQLModel."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...models.user import User
from ..database import SessionFactory


class SQLModelUserRepository:
    """SQLModel-based user repository."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def get_by_id(self, user_id: str) -> Optional[User]:
        with self.session_factory() as session:
            user = session.get(User, user_id)
            if user:
                session.expunge(user)
            return user

    def get_by_email(self, email: str) -> Optional[User]:
        with self.session_factory() as session:
            user = session.exec(select(User).where(User.email == email.strip().lower())).first()
            if user:
                session.expunge(user)
            return user

    def get_by_reset_token_hash(self, token_hash: str) -> Optional[User]:
        with self.session_factory() as session:
            user = session.exec(select(User).where(User.reset_token_hash == token_hash)).first()
            if user:
                session.expunge(user)
            return user

    def create(self, user: User) -> User:
        with self.session_factory() as session:
            user.email = user.email.strip().lower()
            existing = session.exec(select(User).where(User.email == user.email)).first()
            if existing:
                raise ValueError("An account with this email already exists")
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
            return user

    def update(self, user: User) -> User:
        with self.session_factory() as session:
            merged = session.merge(user)
            session.commit()
            session.refresh(merged)
            session.expunge(merged)
            return merged


__all__ = ["SQLModelUserRepository"]
