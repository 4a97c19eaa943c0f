"""Account blueprint package (income sources and profile)."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint(
    "account",
    __name__,
    url_prefix="/account",
)

from . import routes  # noqa: E402,F401 - ensure routes get registered

__all__ = ["bp"]
