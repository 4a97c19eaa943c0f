"""Landing, legend, FAQ and the read-only demo dashboard."""

from __future__ import annotations

from flask import render_template, request

from ...constants.categories import category_color, expense_color, income_color, normalize_category
from ...constants.currencies import CURRENCIES, CURRENCY_CODES, DEFAULT_CURRENCY
from ...domain.status import summarize
from ...services.demo import demo_expenses, demo_income
from ...services.ledger import SortState, sum_amounts
from ...services.profile import ProfileView
from ..pages import legend_rows
from . import bp

FAQ = (
    (
        "How is my financial status calculated?",
        "We subtract your total expenses from your total income. If more than 20% of your "
        "income remains you are Healthy, below that you Need Attention, and if expenses "
        "exceed income your status is Critical.",
    ),
    (
        "Can I change the currency?",
        "Yes. Pick a currency on your account page; amounts are shown with its symbol.",
    ),
    (
        "Are amounts converted between currencies?",
        "No. The currency only changes the symbol used to display your amounts.",
    ),
    (
        "Can I try it without an account?",
        "The demo dashboard shows sample data without signing in.",
    ),
)


@bp.get("/")
def landing_page():
    """Render the landing page."""

    return render_template("home/index.html")


@bp.get("/legend")
def legend():
    return render_template("home/legend.html", legend=legend_rows())


@bp.get("/faq")
def faq():
    return render_template("home/faq.html", faq=FAQ)


@bp.get("/preview")
def preview():
    """Demo dashboard over built-in sample data; nothing is persisted.

    ``?currency=EUR`` previews the display currency without an account.
    """

    sort = SortState.from_args(request.args)
    currency = request.args.get("currency", "").upper()
    if currency not in CURRENCY_CODES:
        currency = DEFAULT_CURRENCY
    expenses = demo_expenses()
    income = demo_income()
    summary = summarize(sum_amounts(income), sum_amounts(expenses))
    return render_template(
        "home/preview.html",
        profile=ProfileView(id="demo", name="Demo", currency=currency),
        currencies=CURRENCIES,
        summary=summary,
        expenses=sort.apply(expenses),
        incomes=income,
        sort=sort,
        toggle_sort=sort.toggle("amount"),
        normalize_category=normalize_category,
        category_color=category_color,
        expense_color=expense_color,
        income_color=income_color,
        legend=legend_rows(),
    )
