"""Dashboard blueprint package (expense list and financial status)."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint(
    "dashboard",
    __name__,
    url_prefix="/dashboard",
)

from . import routes  # noqa: E402,F401 - ensure routes get registered

__all__ = ["bp"]
