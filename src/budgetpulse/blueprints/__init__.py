"""Blueprint exports."""

from . import account, auth, dashboard, home

__all__ = [
    "account",
    "auth",
    "dashboard",
    "home",
]
