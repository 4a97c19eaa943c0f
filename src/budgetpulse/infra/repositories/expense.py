"""SQLModel implementation of Expense repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...constants.categories import normalize_category
from ...models.expense import Expense
from ..database import SessionFactory


class SQLModelExpenseRepository:
    """SQLModel-based expense repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, expense_id: str, *, user_id: str) -> Optional[Expense]:
        """Retrieve an expense by ID."""
        with self.session_factory() as session:
            obj = session.exec(
                select(Expense).where(Expense.id == expense_id).where(Expense.user_id == user_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self, *, user_id: str) -> list[Expense]:
        """List all expenses, newest first."""
        with self.session_factory() as session:
            statement = (
                select(Expense)
                .where(Expense.user_id == user_id)
                .order_by(Expense.date.desc())  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, expense: Expense, *, user_id: str) -> Expense:
        """Create a new expense."""
        with self.session_factory() as session:
            expense.user_id = user_id
            expense.category = normalize_category(expense.category)
            session.add(expense)
            session.commit()
            session.refresh(expense)
            session.expunge(expense)
            return expense

    def update(self, expense: Expense, *, user_id: str) -> Expense:
        """Update amount, category, name, description and date of an expense."""
        with self.session_factory() as session:
            stored = session.exec(
                select(Expense).where(Expense.id == expense.id).where(Expense.user_id == user_id)
            ).first()
            if stored is None:
                raise LookupError(f"Expense {expense.id} was not found")
            stored.name = expense.name
            stored.amount = expense.amount
            stored.description = expense.description
            stored.category = normalize_category(expense.category)
            stored.date = expense.date
            if expense.color:
                stored.color = expense.color
            session.add(stored)
            session.commit()
            session.refresh(stored)
            session.expunge(stored)
            return stored

    def delete(self, expense_id: str, *, user_id: str) -> None:
        """Delete an expense by ID."""
        with self.session_factory() as session:
            expense = session.exec(
                select(Expense).where(Expense.id == expense_id).where(Expense.user_id == user_id)
            ).first()
            if expense is None:
                raise LookupError(f"Expense {expense_id} was not found")
            session.delete(expense)
            session.commit()


__all__ = ["SQLModelExpenseRepository"]
