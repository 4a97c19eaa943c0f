"""Public pages: landing, legend, FAQ, demo preview and 404."""

from __future__ import annotations

import re


def test_landing_page(client):
    body = client.get("/").get_data(as_text=True)
    assert "Welcome to BudgetPulse" in body
    assert "Log In/Sign Up" in body


def test_legend_page(client):
    body = client.get("/legend").get_data(as_text=True)
    for label in ("Healthy", "Needs Attention", "Critical"):
        assert label in body
    assert "dot-orange" in body


def test_faq_page(client):
    body = client.get("/faq").get_data(as_text=True)
    assert "How is my financial status calculated?" in body


def test_preview_shows_demo_totals(client):
    body = client.get("/preview").get_data(as_text=True)

    assert "Demo Dashboard" in body
    assert 'data-total="income">$3000.00<' in body
    assert 'data-total="expenses">$1730.00<' in body
    assert 'data-status="Healthy"' in body
    assert re.search(r"data-percent>\s*42\.3%\s*<", body)


def test_preview_sorts_by_amount(client):
    body = client.get("/preview?sort=amount&dir=asc").get_data(as_text=True)
    names = re.findall(r'data-expense-id="[^"]+">\s*<td><span[^>]*></span> (\w+)</td>', body)
    assert names == ["Utilities", "Groceries", "Rent"]


def test_unknown_page_is_404(client):
    response = client.get("/no-such-page")
    assert response.status_code == 404
    assert "Page not found" in response.get_data(as_text=True)


def test_preview_currency_choice(client):
    body = client.get("/preview?currency=eur&sort=amount&dir=asc").get_data(as_text=True)

    assert 'data-total="income">€3000.00<' in body
    assert '<option value="EUR" selected>' in body
    assert 'name="sort" value="amount"' in body
    assert "sort=amount&amp;dir=desc&amp;currency=EUR" in body


def test_preview_ignores_unknown_currency(client):
    body = client.get("/preview?currency=XYZ").get_data(as_text=True)
    assert 'data-total="income">$3000.00<' in body
