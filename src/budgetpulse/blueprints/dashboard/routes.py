"""Dashboard routes: expense dialogs, sorting and the status banner."""

from __future__ import annotations

from typing import Optional

from flask import current_app, render_template, request, url_for

from ...access import require_user
from ...constants.categories import (
    EXPENSE_CATEGORIES,
    category_color,
    expense_color,
    normalize_category,
    random_entry_color,
)
from ...domain.status import summarize
from ...extensions import get_backend
from ...models.expense import Expense
from ...models.user import User
from ...services.ledger import LedgerBook, SortState
from ...services.profile import load_profile
from ..pages import (
    BACKEND_ERRORS,
    entry_payload,
    failure_response,
    invalid_form_response,
    legend_rows,
    success_response,
    summary_payload,
    unavailable_response,
)
from . import bp
from .forms import ExpenseForm


def _list_url(sort: SortState) -> str:
    return url_for("dashboard.index", **sort.query_args())


def _render(
    user: User,
    *,
    sort: SortState,
    add_form: Optional[ExpenseForm] = None,
    edit_form: Optional[ExpenseForm] = None,
    edit_id: Optional[str] = None,
):
    """Load both totals fresh and render the dashboard."""

    backend = get_backend()
    profile = load_profile(user, profiles=backend.profiles)
    expenses = LedgerBook.load(backend.expenses, user_id=user.id)
    income = LedgerBook.load(backend.income, user_id=user.id)
    summary = summarize(income.total, expenses.total)

    if edit_form is None and edit_id:
        existing = expenses.get(edit_id)
        if existing is not None:
            edit_form = ExpenseForm.from_mapping(
                {
                    "name": existing.name,
                    "amount": f"{existing.amount:.2f}",
                    "description": existing.description,
                    "category": normalize_category(existing.category),
                }
            )
        else:
            edit_id = None

    return render_template(
        "dashboard/index.html",
        profile=profile,
        summary=summary,
        expenses=sort.apply(expenses.entries),
        sort=sort,
        toggle_sort=sort.toggle("amount"),
        categories=EXPENSE_CATEGORIES,
        normalize_category=normalize_category,
        category_color=category_color,
        expense_color=expense_color,
        legend=legend_rows(),
        add_form=add_form or ExpenseForm(),
        edit_form=edit_form,
        edit_id=edit_id,
    )


def _totals_payload(book: LedgerBook, user: User, entry: Optional[Expense] = None):
    """Running totals after a mutation, for script clients."""

    def build() -> dict:
        backend = get_backend()
        profile = load_profile(user, profiles=backend.profiles)
        income = LedgerBook.load(backend.income, user_id=user.id)
        payload = summary_payload(summarize(income.total, book.total), profile)
        if entry is not None:
            payload["entry"] = entry_payload(entry, profile)
        return payload

    return build


@bp.get("/")
def index():
    """Display the expense list with totals, status and sorting."""

    user = require_user()
    sort = SortState.from_args(request.args)
    try:
        return _render(user, sort=sort, edit_id=request.args.get("edit"))
    except BACKEND_ERRORS:
        current_app.logger.exception("Failed to load dashboard for %s", user.id)
        return unavailable_response()


@bp.post("/expenses")
def create_expense():
    """Validate the add-expense dialog and persist it."""

    user = require_user()
    sort = SortState.from_args(request.args)
    form = ExpenseForm.from_mapping(request.form)
    if not form.validate():
        return invalid_form_response(form, lambda: _render(user, sort=sort, add_form=form))

    try:
        book = LedgerBook.load(get_backend().expenses, user_id=user.id)
        stored = book.add(
            Expense(
                user_id=user.id,
                name=form.name,
                amount=form.amount,
                description=form.description,
                category=form.category,
                color=random_entry_color(),
            )
        )
    except BACKEND_ERRORS:
        current_app.logger.exception("Failed to add expense for %s", user.id)
        return failure_response("Failed to add expense. Please try again.", _list_url(sort))

    return success_response(
        "Your expense has been added successfully.",
        _list_url(sort),
        _totals_payload(book, user, stored),
    )


@bp.post("/expenses/<string:expense_id>")
def update_expense(expense_id: str):
    """Handle the edit-expense dialog."""

    user = require_user()
    sort = SortState.from_args(request.args)
    form = ExpenseForm.from_mapping(request.form)
    if not form.validate():
        return invalid_form_response(
            form, lambda: _render(user, sort=sort, edit_form=form, edit_id=expense_id)
        )

    try:
        book = LedgerBook.load(get_backend().expenses, user_id=user.id)
        existing = book.get(expense_id)
        if existing is None:
            return failure_response(
                "Expense could not be found.", _list_url(sort), status=404, category="warning"
            )
        stored = book.edit(
            Expense(
                id=expense_id,
                user_id=user.id,
                name=form.name,
                amount=form.amount,
                description=form.description,
                category=form.category,
                color=existing.color,
                date=existing.date,
            )
        )
    except BACKEND_ERRORS:
        current_app.logger.exception("Failed to update expense %s", expense_id)
        return failure_response("Failed to update expense. Please try again.", _list_url(sort))

    return success_response(
        "Your expense has been updated successfully.",
        _list_url(sort),
        _totals_payload(book, user, stored),
    )


@bp.post("/expenses/<string:expense_id>/delete")
def delete_expense(expense_id: str):
    user = require_user()
    sort = SortState.from_args(request.args)
    try:
        book = LedgerBook.load(get_backend().expenses, user_id=user.id)
        if book.get(expense_id) is None:
            return failure_response(
                "Expense could not be found.", _list_url(sort), status=404, category="warning"
            )
        book.delete(expense_id)
    except BACKEND_ERRORS:
        current_app.logger.exception("Failed to delete expense %s", expense_id)
        return failure_response("Failed to delete expense. Please try again.", _list_url(sort))

    return success_response(
        "Your expense has been deleted successfully.",
        _list_url(sort),
        _totals_payload(book, user),
    )
