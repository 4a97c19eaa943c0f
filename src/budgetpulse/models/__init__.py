"""SQLModel table exports."""

from .expense import Expense
from .income import Income
from .profile import Profile
from .user import User

__all__ = [
    "Expense",
    "Income",
    "Profile",
    "User",
]
