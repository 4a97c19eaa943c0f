"""SQLModel repository implementations."""

from .expense import SQLModelExpenseRepository
from .income import SQLModelIncomeRepository
from .profile import SQLModelProfileRepository
from .user import SQLModelUserRepository

__all__ = [
    "SQLModelExpenseRepository",
    "SQLModelIncomeRepository",
    "SQLModelProfileRepository",
    "SQLModelUserRepository",
]
