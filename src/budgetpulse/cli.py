"""Flask CLI commands for BudgetPulse."""

from __future__ import annotations

import click
from flask import Flask

from .extensions import get_backend


def init_app(app: Flask) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("budgetpulse-create-user")
    @click.argument("email")
    @click.option("--name", default="", help="Display name stored with the account")
    @click.password_option()
    def create_user(email: str, name: str, password: str) -> None:
        """Create an account without going through the sign-up page."""

        from .services import auth

        try:
            user = auth.sign_up(email=email, password=password, name=name, users=get_backend().users)
        except auth.AuthError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(f"Created user {user.email} ({user.id})")

    @app.cli.command("budgetpulse-seed")
    @click.option("--email", required=True, help="Existing account that receives the demo data")
    def seed(email: str) -> None:
        """Load the demo income and expense entries for an account."""

        from .services.demo import seed_demo_data

        backend = get_backend()
        user = backend.users.get_by_email(email)
        if user is None:
            raise click.ClickException(f"No account found for {email}")
        income_rows, expense_rows = seed_demo_data(
            user_id=user.id, income=backend.income, expenses=backend.expenses
        )
        click.echo(f"Seeded {income_rows} income and {expense_rows} expense entries for {user.email}")
