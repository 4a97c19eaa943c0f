"""Helpers shared by the dashboard-style pages."""

from __future__ import annotations

from typing import Any, Callable

from flask import current_app, flash, jsonify, redirect, render_template, request
from sqlalchemy.exc import SQLAlchemyError

from ..constants.categories import category_color, normalize_category
from ..domain.status import LEGEND, FinancialSummary
from ..services.profile import ProfileView

# Failures a backend call can surface; anything else is a bug and propagates.
BACKEND_ERRORS = (SQLAlchemyError, LookupError, ValueError)


def wants_json() -> bool:
    """True when the client asked for JSON instead of a redirect."""

    return request.accept_mimetypes.best == "application/json"


def entry_payload(entry: Any, profile: ProfileView) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": entry.id,
        "name": entry.name,
        "amount": float(entry.amount),
        "formatted_amount": profile.format(float(entry.amount)),
        "description": entry.description,
        "color": entry.color,
        "date": entry.date.isoformat() if entry.date else None,
    }
    if hasattr(entry, "category"):
        category = normalize_category(entry.category)
        payload["category"] = category
        payload["category_color"] = category_color(category)
    return payload


def summary_payload(summary: FinancialSummary, profile: ProfileView) -> dict[str, Any]:
    return {
        "currency": profile.currency,
        "total_income": summary.total_income,
        "total_expenses": summary.total_expenses,
        "remaining": summary.remaining,
        "formatted_remaining": profile.format(summary.remaining),
        "percent_remaining": summary.percent_display,
        "status": summary.status.label,
        "status_color": summary.status.color,
    }


def legend_rows() -> list[dict[str, str]]:
    return [
        {"label": tier.value, "color": color, "description": description}
        for tier, color, description in LEGEND
    ]


def failure_response(message: str, list_url: str, *, status: int = 500, category: str = "danger"):
    """Flash-and-redirect for browsers, an error document for script clients."""

    if wants_json():
        return jsonify({"error": message}), status
    flash(message, category)
    return redirect(list_url)


def success_response(message: str, list_url: str, payload_factory: Callable[[], dict[str, Any]]):
    """Report a committed write.

    The write already happened, so a failed totals read still answers with
    the success message; ``totals_available`` tells script clients to reload.
    """

    if not wants_json():
        flash(message, "success")
        return redirect(list_url)
    try:
        payload = payload_factory()
    except BACKEND_ERRORS:
        current_app.logger.exception("Saved, but failed to reload totals")
        return jsonify({"message": message, "totals_available": False})
    payload["message"] = message
    payload["totals_available"] = True
    return jsonify(payload)


def unavailable_response():
    return render_template("unavailable.html"), 503


def invalid_form_response(form, render: Callable[[], Any]):
    if wants_json():
        return jsonify({"errors": form.errors}), 400
    try:
        return render(), 400
    except BACKEND_ERRORS:
        current_app.logger.exception("Failed to re-render form with errors")
        return unavailable_response()
