"""Flask CLI commands."""

from __future__ import annotations


def test_create_user_and_seed(app, backend):
    runner = app.test_cli_runner()

    result = runner.invoke(
        args=["budgetpulse-create-user", "dana@example.com", "--name", "Dana", "--password", "long-password"]
    )
    assert result.exit_code == 0, result.output
    assert "Created user dana@example.com" in result.output

    user = backend.users.get_by_email("dana@example.com")
    assert user.name == "Dana"

    result = runner.invoke(args=["budgetpulse-seed", "--email", "dana@example.com"])
    assert result.exit_code == 0, result.output
    assert "Seeded 2 income and 3 expense entries" in result.output
    assert len(backend.expenses.list_all(user_id=user.id)) == 3


def test_create_user_rejects_short_password(app):
    result = app.test_cli_runner().invoke(
        args=["budgetpulse-create-user", "dana@example.com", "--password", "short"]
    )
    assert result.exit_code != 0
    assert "at least 8" in result.output


def test_seed_requires_existing_account(app):
    result = app.test_cli_runner().invoke(args=["budgetpulse-seed", "--email", "ghost@example.com"])
    assert result.exit_code != 0
    assert "No account found for ghost@example.com" in result.output
