"""Account routes: income dialogs and profile preferences."""

from __future__ import annotations

from typing import Optional

from flask import current_app, render_template, request, url_for

from ...access import require_user
from ...constants.categories import income_color
from ...constants.currencies import CURRENCIES
from ...domain.status import summarize
from ...extensions import get_backend
from ...models.income import Income
from ...models.user import User
from ...services.ledger import LedgerBook, SortState
from ...services.profile import load_profile, save_profile
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
from .forms import IncomeForm, ProfileForm


def _list_url(sort: SortState) -> str:
    return url_for("account.index", **sort.query_args())


def _render(
    user: User,
    *,
    sort: SortState,
    add_form: Optional[IncomeForm] = None,
    edit_form: Optional[IncomeForm] = None,
    edit_id: Optional[str] = None,
    profile_form: Optional[ProfileForm] = None,
):
    backend = get_backend()
    profile = load_profile(user, profiles=backend.profiles)
    income = LedgerBook.load(backend.income, user_id=user.id)
    expenses = LedgerBook.load(backend.expenses, user_id=user.id)
    summary = summarize(income.total, expenses.total)

    if edit_form is None and edit_id:
        existing = income.get(edit_id)
        if existing is not None:
            edit_form = IncomeForm.from_mapping(
                {
                    "name": existing.name,
                    "amount": f"{existing.amount:.2f}",
                    "description": existing.description,
                }
            )
        else:
            edit_id = None

    if profile_form is None:
        profile_form = ProfileForm.from_mapping({"name": profile.name, "currency": profile.currency})

    return render_template(
        "account/index.html",
        profile=profile,
        summary=summary,
        incomes=sort.apply(income.entries),
        sort=sort,
        toggle_sort=sort.toggle("amount"),
        currencies=CURRENCIES,
        income_color=income_color,
        legend=legend_rows(),
        add_form=add_form or IncomeForm(),
        edit_form=edit_form,
        edit_id=edit_id,
        profile_form=profile_form,
    )


def _totals_payload(book: LedgerBook, user: User, entry: Optional[Income] = None):
    def build() -> dict:
        backend = get_backend()
        profile = load_profile(user, profiles=backend.profiles)
        expenses = LedgerBook.load(backend.expenses, user_id=user.id)
        payload = summary_payload(summarize(book.total, expenses.total), profile)
        if entry is not None:
            payload["entry"] = entry_payload(entry, profile)
        return payload

    return build


@bp.get("/")
def index():
    """Display income sources, totals and the profile form."""

    user = require_user()
    sort = SortState.from_args(request.args)
    try:
        return _render(user, sort=sort, edit_id=request.args.get("edit"))
    except BACKEND_ERRORS:
        current_app.logger.exception("Failed to load account page for %s", user.id)
        return unavailable_response()


@bp.post("/income")
def create_income():
    user = require_user()
    sort = SortState.from_args(request.args)
    form = IncomeForm.from_mapping(request.form)
    if not form.validate():
        return invalid_form_response(form, lambda: _render(user, sort=sort, add_form=form))

    try:
        book = LedgerBook.load(get_backend().income, user_id=user.id)
        stored = book.add(
            Income(
                user_id=user.id,
                name=form.name,
                amount=form.amount,
                description=form.description,
            )
        )
    except BACKEND_ERRORS:
        current_app.logger.exception("Failed to add income for %s", user.id)
        return failure_response("Failed to add income source. Please try again.", _list_url(sort))

    return success_response(
        "Your income source has been added successfully.",
        _list_url(sort),
        _totals_payload(book, user, stored),
    )


@bp.post("/income/<string:income_id>")
def update_income(income_id: str):
    user = require_user()
    sort = SortState.from_args(request.args)
    form = IncomeForm.from_mapping(request.form)
    if not form.validate():
        return invalid_form_response(
            form, lambda: _render(user, sort=sort, edit_form=form, edit_id=income_id)
        )

    try:
        book = LedgerBook.load(get_backend().income, user_id=user.id)
        existing = book.get(income_id)
        if existing is None:
            return failure_response(
                "Income source could not be found.", _list_url(sort), status=404, category="warning"
            )
        stored = book.edit(
            Income(
                id=income_id,
                user_id=user.id,
                name=form.name,
                amount=form.amount,
                description=form.description,
                color=existing.color,
                date=existing.date,
            )
        )
    except BACKEND_ERRORS:
        current_app.logger.exception("Failed to update income %s", income_id)
        return failure_response(
            "Failed to update income source. Please try again.", _list_url(sort)
        )

    return success_response(
        "Your income source has been updated successfully.",
        _list_url(sort),
        _totals_payload(book, user, stored),
    )


@bp.post("/income/<string:income_id>/delete")
def delete_income(income_id: str):
    user = require_user()
    sort = SortState.from_args(request.args)
    try:
        book = LedgerBook.load(get_backend().income, user_id=user.id)
        if book.get(income_id) is None:
            return failure_response(
                "Income source could not be found.", _list_url(sort), status=404, category="warning"
            )
        book.delete(income_id)
    except BACKEND_ERRORS:
        current_app.logger.exception("Failed to delete income %s", income_id)
        return failure_response(
            "Failed to delete income source. Please try again.", _list_url(sort)
        )

    return success_response(
        "Your income source has been deleted successfully.",
        _list_url(sort),
        _totals_payload(book, user),
    )


@bp.post("/profile")
def update_profile():
    """Upsert display name and currency."""

    user = require_user()
    form = ProfileForm.from_mapping(request.form)
    if not form.validate():
        return invalid_form_response(
            form, lambda: _render(user, sort=SortState(), profile_form=form)
        )

    try:
        profile = save_profile(
            user, name=form.name, currency=form.currency, profiles=get_backend().profiles
        )
    except BACKEND_ERRORS:
        current_app.logger.exception("Failed to update profile for %s", user.id)
        return failure_response(
            "Failed to update your profile. Please try again.", url_for("account.index")
        )

    return success_response(
        "Your profile has been updated successfully.",
        url_for("account.index"),
        lambda: {"name": profile.name, "currency": profile.currency, "symbol": profile.symbol},
    )
