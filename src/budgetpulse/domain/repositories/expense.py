"""Expense repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.expense import Expense


class ExpenseRepository(Protocol):
    """Repository for managing expense entities."""

    def get_by_id(self, expense_id: str, *, user_id: str) -> Optional[Expense]:
        """Retrieve an expense by ID."""
        ...

    def list_all(self, *, user_id: str) -> list[Expense]:
        """List all expenses, newest first."""
        ...

    def create(self, expense: Expense, *, user_id: str) -> Expense:
        """Create a new expense."""
        ...

    def update(self, expense: Expense, *, user_id: str) -> Expense:
        """Update an existing expense."""
        ...

    def delete(self, expense_id: str, *, user_id: str) -> None:
        """Delete an expense by ID."""
        ...
