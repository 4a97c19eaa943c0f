"""Identifier and timestamp helpers shared by the table models."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone


def new_id() -> str:
    """Return an opaque identifier for a new row."""

    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
