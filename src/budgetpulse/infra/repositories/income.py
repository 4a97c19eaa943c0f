"""SQLModel implementation of Income repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...models.income import Income
from ..database import SessionFactory


class SQLModelIncomeRepository:
    """SQLModel-based income repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def get_by_id(self, income_id: str, *, user_id: str) -> Optional[Income]:
        with self.session_factory() as session:
            obj = session.exec(
                select(Income).where(Income.id == income_id).where(Income.user_id == user_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self, *, user_id: str) -> list[Income]:
        """List all income entries, newest first."""
        with self.session_factory() as session:
            statement = (
                select(Income)
                .where(Income.user_id == user_id)
                .order_by(Income.date.desc())  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, income: Income, *, user_id: str) -> Income:
        with self.session_factory() as session:
            income.user_id = user_id
            session.add(income)
            session.commit()
            session.refresh(income)
            session.expunge(income)
            return income

    def update(self, income: Income, *, user_id: str) -> Income:
        """Update amount, name, description and date of an income entry."""
        with self.session_factory() as session:
            stored = session.exec(
                select(Income).where(Income.id == income.id).where(Income.user_id == user_id)
            ).first()
            if stored is None:
                raise LookupError(f"Income {income.id} was not found")
            stored.name = income.name
            stored.amount = income.amount
            stored.description = income.description
            stored.date = income.date
            if income.color:
                stored.color = income.color
            session.add(stored)
            session.commit()
            session.refresh(stored)
            session.expunge(stored)
            return stored

    def delete(self, income_id: str, *, user_id: str) -> None:
        with self.session_factory() as session:
            income = session.exec(
                select(Income).where(Income.id == income_id).where(Income.user_id == user_id)
            ).first()
            if income is None:
                raise LookupError(f"Income {income_id} was not found")
            session.delete(income)
            session.commit()


__all__ = ["SQLModelIncomeRepository"]
