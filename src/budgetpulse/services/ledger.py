"""Entry lists with cached totals, plus amount sorting for list views."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Iterable, Mapping, Optional, Protocol, Sequence, TypeVar

from ..logging_config import get_logger

logger = get_logger(__name__)

SORTABLE_COLUMNS = ("amount",)
ASC = "asc"
DESC = "desc"


class LedgerEntry(Protocol):
    id: str
    amount: float


EntryT = TypeVar("EntryT", bound=LedgerEntry)


class EntryRepository(Protocol[EntryT]):
    """The subset of the income/expense repositories a ledger needs."""

    def list_all(self, *, user_id: str) -> list[EntryT]:  # pragma: no cover - interface
        ...

    def create(self, entry: EntryT, *, user_id: str) -> EntryT:  # pragma: no cover - interface
        ...

    def update(self, entry: EntryT, *, user_id: str) -> EntryT:  # pragma: no cover - interface
        ...

    def delete(self, entry_id: str, *, user_id: str) -> None:  # pragma: no cover - interface
        ...


def sum_amounts(entries: Iterable[LedgerEntry]) -> float:
    return sum((float(entry.amount) for entry in entries), 0.0)


class LedgerBook(Generic[EntryT]):
    """One user's entries of a single kind with a running total.

    The list and the total change only after the repository call succeeded,
    so a failed write leaves both exactly as they were.
    """

    def __init__(
        self,
        repository: EntryRepository[EntryT],
        *,
        user_id: str,
        entries: Sequence[EntryT] = (),
    ) -> None:
        self.repository = repository
        self.user_id = user_id
        self.entries: list[EntryT] = list(entries)
        self.total: float = sum_amounts(self.entries)

    @classmethod
    def load(cls, repository: EntryRepository[EntryT], *, user_id: str) -> "LedgerBook[EntryT]":
        """Fetch the user's entries (newest first) and sum them once."""

        return cls(repository, user_id=user_id, entries=repository.list_all(user_id=user_id))

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, entry_id: str) -> Optional[EntryT]:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def add(self, entry: EntryT) -> EntryT:
        stored = self.repository.create(entry, user_id=self.user_id)
        self.entries.insert(0, stored)
        self.total += float(stored.amount)
        logger.info("Entry added", extra={"entry_id": stored.id, "user_id": self.user_id})
        return stored

    def edit(self, entry: EntryT) -> EntryT:
        previous = self.get(entry.id)
        if previous is None:
            raise LookupError(f"Entry {entry.id} is not part of this ledger")
        previous_amount = float(previous.amount)
        stored = self.repository.update(entry, user_id=self.user_id)
        self.entries = [stored if item.id == stored.id else item for item in self.entries]
        self.total += float(stored.amount) - previous_amount
        logger.info("Entry updated", extra={"entry_id": stored.id, "user_id": self.user_id})
        return stored

    def delete(self, entry_id: str) -> EntryT:
        removed = self.get(entry_id)
        if removed is None:
            raise LookupError(f"Entry {entry_id} is not part of this ledger")
        self.repository.delete(entry_id, user_id=self.user_id)
        self.entries = [item for item in self.entries if item.id != entry_id]
        self.total -= float(removed.amount)
        logger.info("Entry deleted", extra={"entry_id": entry_id, "user_id": self.user_id})
        return removed

    def resummed_total(self) -> float:
        """Sum the current list from scratch (the cached total must match)."""

        return sum_amounts(self.entries)


@dataclass(frozen=True, slots=True)
class SortState:
    """Active sort column and direction; ``column=None`` keeps load order."""

    column: Optional[str] = None
    direction: str = DESC

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "SortState":
        """Read ``sort`` and ``dir`` query parameters, ignoring junk values."""

        column = args.get("sort")
        if column not in SORTABLE_COLUMNS:
            return cls()
        direction = args.get("dir", DESC)
        if direction not in (ASC, DESC):
            direction = DESC
        return cls(column=column, direction=direction)

    def toggle(self, clicked: Optional[str]) -> "SortState":
        """Return the state after a click on the ``clicked`` column header."""

        if clicked not in SORTABLE_COLUMNS:
            return self
        if self.column == clicked:
            return replace(self, direction=ASC if self.direction == DESC else DESC)
        return SortState(column=clicked, direction=DESC)

    def apply(self, entries: Iterable[EntryT]) -> list[EntryT]:
        items = list(entries)
        if self.column is None:
            return items
        # sorted() is stable in both directions, so equal amounts keep load order.
        return sorted(items, key=lambda entry: entry.amount, reverse=self.direction == DESC)

    def indicator(self, column: str) -> str:
        if self.column != column:
            return ""
        return " ▲" if self.direction == ASC else " ▼"

    def query_args(self) -> dict[str, str]:
        if self.column is None:
            return {}
        return {"sort": self.column, "dir": self.direction}


__all__ = ["LedgerBook", "SortState", "sum_amounts"]
