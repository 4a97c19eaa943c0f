"""Running totals and amount sorting."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace

import pytest
from sqlalchemy.exc import SQLAlchemyError

from budgetpulse.services.ledger import LedgerBook, SortState, sum_amounts


@dataclass
class Entry:
    id: str
    amount: float
    name: str = ""


class InMemoryRepository:
    """Stand-in for the income/expense repositories."""

    def __init__(self, entries=()):
        self.rows = {entry.id: entry for entry in entries}
        self.fail = False
        self._counter = 0

    def _check(self):
        if self.fail:
            raise SQLAlchemyError("backend unavailable")

    def list_all(self, *, user_id):
        return list(self.rows.values())

    def create(self, entry, *, user_id):
        self._check()
        self._counter += 1
        stored = replace(entry, id=f"new-{self._counter}")
        self.rows[stored.id] = stored
        return stored

    def update(self, entry, *, user_id):
        self._check()
        if entry.id not in self.rows:
            raise LookupError(entry.id)
        self.rows[entry.id] = entry
        return entry

    def delete(self, entry_id, *, user_id):
        self._check()
        if entry_id not in self.rows:
            raise LookupError(entry_id)
        del self.rows[entry_id]


@pytest.fixture
def book():
    repo = InMemoryRepository([Entry("a", 1200.0), Entry("b", 350.0), Entry("c", 180.0)])
    return LedgerBook.load(repo, user_id="u1")


def test_load_sums_once(book):
    assert book.total == pytest.approx(1730.0)
    assert [entry.id for entry in book.entries] == ["a", "b", "c"]


def test_add_prepends_and_increments_total(book):
    stored = book.add(Entry("", 1200.0))

    assert book.entries[0] is stored
    assert book.total == pytest.approx(2930.0)


def test_edit_applies_amount_difference_in_place(book):
    book.edit(Entry("b", 400.0, name="Groceries"))

    assert [entry.id for entry in book.entries] == ["a", "b", "c"]
    assert book.get("b").amount == 400.0
    assert book.total == pytest.approx(1780.0)


def test_delete_subtracts_removed_amount(book):
    removed = book.delete("a")

    assert removed.amount == 1200.0
    assert book.get("a") is None
    assert book.total == pytest.approx(530.0)


def test_unknown_entry_is_rejected_before_backend_call(book):
    book.repository.fail = True
    with pytest.raises(LookupError):
        book.edit(Entry("missing", 5.0))
    with pytest.raises(LookupError):
        book.delete("missing")


def test_failed_backend_call_leaves_state_unchanged(book):
    before = (list(book.entries), book.total)
    book.repository.fail = True

    for operation in (
        lambda: book.add(Entry("", 10.0)),
        lambda: book.edit(Entry("a", 10.0)),
        lambda: book.delete("a"),
    ):
        with pytest.raises(SQLAlchemyError):
            operation()
        assert (book.entries, book.total) == before


def test_cached_total_tracks_random_operation_sequences():
    rng = random.Random(2024)
    book = LedgerBook(InMemoryRepository(), user_id="u1")

    for _ in range(300):
        action = rng.choice(("add", "edit", "delete")) if book.entries else "add"
        amount = round(rng.uniform(0.01, 5000), 2)
        if action == "add":
            book.add(Entry("", amount))
        elif action == "edit":
            target = rng.choice(book.entries)
            book.edit(Entry(target.id, amount))
        else:
            book.delete(rng.choice(book.entries).id)

        assert book.total == pytest.approx(book.resummed_total(), abs=1e-6)
        assert book.resummed_total() == pytest.approx(sum_amounts(book.repository.rows.values()))


def test_sort_directions_are_reverses_of_each_other():
    entries = [Entry(str(i), amount) for i, amount in enumerate([350, 1200, 180, 99.5, 640])]
    ascending = SortState("amount", "asc").apply(entries)
    descending = SortState("amount", "desc").apply(entries)

    assert [e.amount for e in ascending] == [99.5, 180, 350, 640, 1200]
    assert descending == list(reversed(ascending))


def test_sort_is_stable_for_equal_amounts():
    entries = [Entry("first", 50), Entry("x", 10), Entry("second", 50), Entry("third", 50)]

    ascending = SortState("amount", "asc").apply(entries)
    descending = SortState("amount", "desc").apply(entries)

    assert [e.id for e in ascending] == ["x", "first", "second", "third"]
    assert [e.id for e in descending] == ["first", "second", "third", "x"]


def test_unsorted_state_keeps_load_order():
    entries = [Entry("b", 2), Entry("a", 1), Entry("c", 3)]
    assert SortState().apply(entries) == entries


def test_toggle_cycle():
    state = SortState()
    first = state.toggle("amount")
    assert (first.column, first.direction) == ("amount", "desc")
    second = first.toggle("amount")
    assert second.direction == "asc"
    assert second.toggle("amount").direction == "desc"
    assert second.toggle("name") == second
    assert second.indicator("amount") == " ▲"
    assert first.indicator("amount") == " ▼"
    assert state.indicator("amount") == ""


def test_sort_state_from_query_args():
    assert SortState.from_args({"sort": "amount", "dir": "asc"}) == SortState("amount", "asc")
    assert SortState.from_args({"sort": "amount", "dir": "sideways"}) == SortState("amount", "desc")
    assert SortState.from_args({"sort": "name"}) == SortState()
    assert SortState("amount", "asc").query_args() == {"sort": "amount", "dir": "asc"}
    assert SortState().query_args() == {}
