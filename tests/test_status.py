"""Financial status classification tests."""

from __future__ import annotations

import itertools

import pytest

from budgetpulse.domain.status import (
    LEGEND,
    StatusTier,
    classify,
    format_percent,
    percent_remaining,
    summarize,
)


def test_classifier_matches_definition_over_sample_totals():
    """Critical iff overspent, Healthy iff 20% or more of income remains."""

    samples = [0.0, 1.0, 99.99, 600.0, 1000.0, 1200.0, 2400.0, 2930.0, 3000.0, 12345.67]
    for income, expenses in itertools.product(samples, repeat=2):
        status = classify(income, expenses)
        remaining = income - expenses
        assert (status.tier is StatusTier.CRITICAL) == (income < expenses)
        assert (status.tier is StatusTier.HEALTHY) == (remaining >= 0.2 * income)
        if status.tier is StatusTier.NEEDS_ATTENTION:
            assert 0 <= remaining < 0.2 * income


def test_status_colors():
    assert classify(3000, 1000).color == "green"
    assert classify(3000, 2930).color == "orange"
    assert classify(1000, 1200).color == "red"


def test_income_split_across_sources_is_healthy():
    income = [2500, 500]
    summary = summarize(sum(income), 1800)

    assert summary.remaining == 1200
    assert summary.status.label == "Healthy"


def test_additional_expense_moves_to_needs_attention():
    expenses = [1200, 350, 180]
    assert summarize(3000, sum(expenses)).status.label == "Healthy"

    expenses.append(1200)
    summary = summarize(3000, sum(expenses))
    assert summary.total_expenses == 2930
    assert summary.remaining == 70
    assert summary.status.label == "Needs Attention"


def test_overspending_is_critical_and_percentage_is_clamped():
    summary = summarize(1000, 1200)

    assert summary.remaining == -200
    assert summary.status.tier is StatusTier.CRITICAL
    assert summary.percent_remaining == 0
    assert summary.percent_display == "0%"


def test_zero_income_never_divides():
    assert percent_remaining(0, 0) == 0
    assert format_percent(0, 0) == "0%"
    # Exactly zero remaining sits on the boundary: not overspent, below 20% of nothing.
    assert classify(0, 0).tier is StatusTier.HEALTHY
    assert classify(0, 50).tier is StatusTier.CRITICAL


def test_percent_display_uses_one_decimal():
    assert percent_remaining(3000, 1730) == pytest.approx(42.333, rel=1e-3)
    assert format_percent(3000, 1730) == "42.3%"
    assert format_percent(3000, 3000) == "0.0%"


def test_legend_lists_each_tier_once():
    tiers = [tier for tier, _color, _description in LEGEND]
    assert tiers == [StatusTier.HEALTHY, StatusTier.NEEDS_ATTENTION, StatusTier.CRITICAL]
    assert LEGEND[2][2] == "Expenses exceed income"
