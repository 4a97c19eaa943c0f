"""Pytest configuration and shared fixtures for BudgetPulse tests.

Every fixture builds its own SQLite file under ``tmp_path`` so tests never
touch the real instance database.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from budgetpulse import create_app
from budgetpulse.infra.database import create_session_factory
from budgetpulse.infra.repositories import (
    SQLModelExpenseRepository,
    SQLModelIncomeRepository,
    SQLModelProfileRepository,
    SQLModelUserRepository,
)
from budgetpulse.models import User

# Import all models so they're registered with SQLModel metadata
import budgetpulse.models  # noqa: F401

TEST_PASSWORD = "correct-horse"


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine(tmp_path: Path):
    """Create an isolated SQLite database file for each test."""

    engine = create_engine(f"sqlite:///{tmp_path / 'repo.db'}", echo=False)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what the repositories expect."""

    return create_session_factory(db_engine)


@pytest.fixture
def users(session_factory) -> SQLModelUserRepository:
    return SQLModelUserRepository(session_factory)


@pytest.fixture
def expense_repo(session_factory) -> SQLModelExpenseRepository:
    return SQLModelExpenseRepository(session_factory)


@pytest.fixture
def income_repo(session_factory) -> SQLModelIncomeRepository:
    return SQLModelIncomeRepository(session_factory)


@pytest.fixture
def profile_repo(session_factory) -> SQLModelProfileRepository:
    return SQLModelProfileRepository(session_factory)


@pytest.fixture
def user_factory(users):
    """Factory persisting users with a throwaway password hash."""

    def _create_user(email: str = "tester@example.com", name: str = "Tester") -> User:
        return users.create(User(email=email, name=name, password_hash="dummy-hash"))

    return _create_user


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BUDGETPULSE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BUDGETPULSE_DATABASE_URL", f"sqlite:///{tmp_path / 'app.db'}")
    monkeypatch.setenv("BUDGETPULSE_SECRET_KEY", "test-secret")
    return create_app("testing")


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def backend(app):
    return app.extensions["budgetpulse"]


@pytest.fixture()
def signed_in(client, backend):
    """Register an account through the pages and keep its session cookie."""

    response = client.post(
        "/signup",
        data={"name": "Casey", "email": "casey@example.com", "password": TEST_PASSWORD},
    )
    assert response.status_code == 302
    response = client.post(
        "/login", data={"email": "casey@example.com", "password": TEST_PASSWORD}
    )
    assert response.status_code == 302
    return backend.users.get_by_email("casey@example.com")
