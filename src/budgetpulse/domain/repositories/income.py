"""Income repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.income import Income


class IncomeRepository(Protocol):
    """Repository for managing income entities."""

    def get_by_id(self, income_id: str, *, user_id: str) -> Optional[Income]:
        """Retrieve an income entry by ID."""
        ...

    def list_all(self, *, user_id: str) -> list[Income]:
        """List all income entries, newest first."""
        ...

    def create(self, income: Income, *, user_id: str) -> Income:
        """Create a new income entry."""
        ...

    def update(self, income: Income, *, user_id: str) -> Income:
        """Update an existing income entry."""
        ...

    def delete(self, income_id: str, *, user_id: str) -> None:
        """Delete an income entry by ID."""
        ...
