"""Financial health classification shared by every dashboard page.

The status is derived from two running totals only:

* ``remaining < 0`` is critical,
* ``remaining`` below 20% of income needs attention,
* anything else is healthy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

HEALTHY_RATIO = 0.2


class StatusTier(str, Enum):
    """Three-valued financial status."""

    HEALTHY = "Healthy"
    NEEDS_ATTENTION = "Needs Attention"
    CRITICAL = "Critical"


_COLORS = {
    StatusTier.HEALTHY: "green",
    StatusTier.NEEDS_ATTENTION: "orange",
    StatusTier.CRITICAL: "red",
}


@dataclass(frozen=True, slots=True)
class FinancialStatus:
    tier: StatusTier
    color: str

    @property
    def label(self) -> str:
        return self.tier.value

    @property
    def css_class(self) -> str:
        return f"status-{self.color}"


@dataclass(frozen=True, slots=True)
class FinancialSummary:
    """Totals and derived values rendered on dashboard-style pages."""

    total_income: float
    total_expenses: float
    remaining: float
    percent_remaining: float
    percent_display: str
    status: FinancialStatus


# Ordered as shown in the legend component.
LEGEND: tuple[tuple[StatusTier, str, str], ...] = (
    (StatusTier.HEALTHY, _COLORS[StatusTier.HEALTHY], "More than 20% of income remaining"),
    (
        StatusTier.NEEDS_ATTENTION,
        _COLORS[StatusTier.NEEDS_ATTENTION],
        "Less than 20% of income remaining",
    ),
    (StatusTier.CRITICAL, _COLORS[StatusTier.CRITICAL], "Expenses exceed income"),
)


def classify(total_income: float, total_expenses: float) -> FinancialStatus:
    """Return the status tier and color for the given totals."""

    remaining = total_income - total_expenses
    if remaining < 0:
        tier = StatusTier.CRITICAL
    elif remaining < HEALTHY_RATIO * total_income:
        tier = StatusTier.NEEDS_ATTENTION
    else:
        tier = StatusTier.HEALTHY
    return FinancialStatus(tier=tier, color=_COLORS[tier])


def percent_remaining(total_income: float, total_expenses: float) -> float:
    """Share of income left over, clamped to zero when overspent."""

    if total_income == 0:
        return 0.0
    remaining = total_income - total_expenses
    if remaining < 0:
        return 0.0
    return remaining / total_income * 100


def format_percent(total_income: float, total_expenses: float) -> str:
    if total_income == 0 or total_income - total_expenses < 0:
        return "0%"
    return f"{percent_remaining(total_income, total_expenses):.1f}%"


def summarize(total_income: float, total_expenses: float) -> FinancialSummary:
    """Bundle totals with the derived status for templates."""

    return FinancialSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        remaining=total_income - total_expenses,
        percent_remaining=percent_remaining(total_income, total_expenses),
        percent_display=format_percent(total_income, total_expenses),
        status=classify(total_income, total_expenses),
    )


__all__ = [
    "FinancialStatus",
    "FinancialSummary",
    "LEGEND",
    "StatusTier",
    "classify",
    "format_percent",
    "percent_remaining",
    "summarize",
]
