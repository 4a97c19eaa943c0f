"""Sample data for the public preview page and the seed command."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ..domain.repositories import ExpenseRepository, IncomeRepository
from ..logging_config import get_logger
from ..models.expense import Expense
from ..models.income import Income

logger = get_logger(__name__)

DEMO_USER_ID = "demo"

# (name, amount, description, color)
DEMO_INCOME = (
    ("Salary", 2500.0, "Monthly salary from work", "#4CAF50"),
    ("Freelance", 500.0, "Side projects", "#2196F3"),
)

# (name, amount, description, category, color)
DEMO_EXPENSES = (
    ("Rent", 1200.0, "Monthly apartment rent", "Housing", "#FF5733"),
    ("Groceries", 350.0, "Weekly grocery shopping", "Food", "#33FF57"),
    ("Utilities", 180.0, "Electricity and water", "Utilities", "#3357FF"),
)


def _dates(count: int, *, now: datetime | None = None) -> list[datetime]:
    """Newest-first timestamps one day apart."""

    start = now or datetime.now(timezone.utc)
    return [start - timedelta(days=offset) for offset in range(count)]


def demo_income(*, user_id: str = DEMO_USER_ID, now: datetime | None = None) -> list[Income]:
    dates = _dates(len(DEMO_INCOME), now=now)
    return [
        Income(
            id=f"demo-income-{index}",
            user_id=user_id,
            name=name,
            amount=amount,
            description=description,
            color=color,
            date=dates[index],
        )
        for index, (name, amount, description, color) in enumerate(DEMO_INCOME)
    ]


def demo_expenses(*, user_id: str = DEMO_USER_ID, now: datetime | None = None) -> list[Expense]:
    dates = _dates(len(DEMO_EXPENSES), now=now)
    return [
        Expense(
            id=f"demo-expense-{index}",
            user_id=user_id,
            name=name,
            amount=amount,
            description=description,
            category=category,
            color=color,
            date=dates[index],
        )
        for index, (name, amount, description, category, color) in enumerate(DEMO_EXPENSES)
    ]


def seed_demo_data(
    *,
    user_id: str,
    income: IncomeRepository,
    expenses: ExpenseRepository,
) -> tuple[int, int]:
    """Persist the demo entries for ``user_id``; returns (income, expense) counts."""

    income_rows = 0
    for entry in demo_income(user_id=user_id):
        income.create(
            Income(
                name=entry.name,
                amount=entry.amount,
                description=entry.description,
                color=entry.color,
                date=entry.date,
                user_id=user_id,
            ),
            user_id=user_id,
        )
        income_rows += 1

    expense_rows = 0
    for entry in demo_expenses(user_id=user_id):
        expenses.create(
            Expense(
                name=entry.name,
                amount=entry.amount,
                description=entry.description,
                category=entry.category,
                color=entry.color,
                date=entry.date,
                user_id=user_id,
            ),
            user_id=user_id,
        )
        expense_rows += 1

    logger.info(
        "Demo data seeded",
        extra={"user_id": user_id, "income": income_rows, "expenses": expense_rows},
    )
    return income_rows, expense_rows
