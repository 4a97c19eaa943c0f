"""Repository protocols for the backend data store."""

from .expense import ExpenseRepository
from .income import IncomeRepository
from .profile import ProfileRepository
from .user import UserRepository

__all__ = [
    "ExpenseRepository",
    "IncomeRepository",
    "ProfileRepository",
    "UserRepository",
]
