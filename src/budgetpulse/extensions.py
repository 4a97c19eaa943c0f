"""Database and repository wiring for the Flask app."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, current_app
from sqlalchemy.engine import Engine

from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import (
    SQLModelExpenseRepository,
    SQLModelIncomeRepository,
    SQLModelProfileRepository,
    SQLModelUserRepository,
)
from .services.auth import SessionEvents

EXTENSION_KEY = "budgetpulse"


@dataclass
class Backend:
    """Everything a request needs to talk to the data store."""

    engine: Engine
    session_factory: SessionFactory
    users: SQLModelUserRepository
    expenses: SQLModelExpenseRepository
    income: SQLModelIncomeRepository
    profiles: SQLModelProfileRepository
    session_events: SessionEvents


def init_db(app: Flask) -> Backend:
    """Create the engine and repositories and attach them to ``app``."""

    config: BaseConfig = app.config["BUDGETPULSE_CONFIG"]
    engine, session_factory = bootstrap_database(config)
    backend = Backend(
        engine=engine,
        session_factory=session_factory,
        users=SQLModelUserRepository(session_factory),
        expenses=SQLModelExpenseRepository(session_factory),
        income=SQLModelIncomeRepository(session_factory),
        profiles=SQLModelProfileRepository(session_factory),
        session_events=SessionEvents(),
    )
    app.extensions[EXTENSION_KEY] = backend
    return backend


def get_backend() -> Backend:
    """Return the backend bound to the active Flask app."""

    backend = current_app.extensions.get(EXTENSION_KEY)
    if backend is None:  # pragma: no cover - exercised in integration tests
        raise RuntimeError("Database backend not initialized")
    return backend
