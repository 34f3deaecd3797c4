"""Expense Analytics - pure reductions behind the budget dashboard.

Invariants:
    - All functions are PURE: no IO, no async, no clock reads (today is passed in)
    - Money is summed as Decimal and only converted to float at the output edge
    - total_spent(filter_expenses(...)) equals the sum of the filtered amounts
    - Budget status is computed over the same filtered expenses as the totals
    - Insight order: per-budget warnings/cautions in budget order, then one info line

Design Decisions:
    - WEEK is a rolling 7-day window ending today; MONTH and YEAR are calendar-aligned
    - Monthly trend ignores the window (category filter still applies) and keeps
      the last six months that have data
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from decimal import Decimal

from zenstudent.core.domain_types import (
    DateWindow, InsightType, EXPENSE_CATEGORIES, expense_category_name,
)
from zenstudent.core.record_protocols import BudgetLike, ExpenseLike
from zenstudent.core.rounding import round_half_up_int, to_cents

TREND_MONTHS = 6
CAUTION_THRESHOLD = 80

_ZERO = Decimal("0")


# ─── Filtering ──────────────────────────────────────────────────

def in_window(day: date, window: DateWindow, today: date) -> bool:
    """Whether a calendar day falls inside the window relative to today."""
    if window == DateWindow.WEEK:
        return day >= today - timedelta(days=7)
    if window == DateWindow.MONTH:
        return (day.year, day.month) == (today.year, today.month)
    if window == DateWindow.YEAR:
        return day.year == today.year
    return True


def filter_expenses(
    expenses: Iterable[ExpenseLike],
    window: DateWindow,
    today: date,
    category: str | None = None,
    include_recurring: bool = True,
) -> list[ExpenseLike]:
    """Expenses inside the window (and category), newest date first."""
    selected = [
        e for e in expenses
        if (category is None or e.category == category)
        and (include_recurring or not e.is_recurring)
        and in_window(e.date, window, today)
    ]
    return sorted(selected, key=lambda e: e.date, reverse=True)


# ─── Totals ─────────────────────────────────────────────────────

def total_spent(expenses: Iterable[ExpenseLike]) -> Decimal:
    return sum((Decimal(e.amount) for e in expenses), _ZERO)


def _sum_by_category(expenses: Iterable[ExpenseLike]) -> dict[str, Decimal]:
    totals: dict[str, Decimal] = defaultdict(lambda: _ZERO)
    for e in expenses:
        totals[e.category] += Decimal(e.amount)
    return totals


def category_totals(expenses: Iterable[ExpenseLike]) -> list[dict]:
    """Non-zero totals per category, in catalog order, unknown categories last."""
    totals = _sum_by_category(expenses)
    known = [c.id for c in EXPENSE_CATEGORIES]
    ordered = known + sorted(k for k in totals if k not in known)
    return [
        {
            "category": cid,
            "name": expense_category_name(cid),
            "amount": to_cents(totals[cid]),
        }
        for cid in ordered
        if totals.get(cid, _ZERO) > 0
    ]


# ─── Budgets ────────────────────────────────────────────────────

def budget_status(
    budgets: Iterable[BudgetLike], expenses: Iterable[ExpenseLike],
) -> list[dict]:
    """Per-budget consumption over the given (already filtered) expenses."""
    spent_by_category = _sum_by_category(expenses)
    statuses = []
    for budget in budgets:
        cap = Decimal(budget.amount)
        spent = spent_by_category.get(budget.category, _ZERO)
        percentage = float(spent / cap * 100) if cap > 0 else 0.0
        statuses.append({
            "id": getattr(budget, "id", None),
            "category": budget.category,
            "name": expense_category_name(budget.category),
            "amount": to_cents(cap),
            "spent": to_cents(spent),
            "percentage": percentage,
            "remaining": to_cents(max(cap - spent, _ZERO)),
            "overBy": to_cents(max(spent - cap, _ZERO)),
            "isOverBudget": spent > cap,
        })
    return statuses


# ─── Trend ──────────────────────────────────────────────────────

def monthly_trend(
    expenses: Iterable[ExpenseLike], months: int = TREND_MONTHS,
) -> list[dict]:
    """Summed amounts per calendar month, oldest first, last `months` months with data."""
    buckets: dict[str, Decimal] = defaultdict(lambda: _ZERO)
    for e in expenses:
        buckets[e.date.strftime("%Y-%m")] += Decimal(e.amount)
    keys = sorted(buckets)[-months:] if months > 0 else []
    return [
        {
            "key": key,
            "month": date.fromisoformat(f"{key}-01").strftime("%b %y"),
            "amount": to_cents(buckets[key]),
        }
        for key in keys
    ]


# ─── Insights ───────────────────────────────────────────────────

def build_insights(
    statuses: Sequence[dict], totals: Sequence[dict],
) -> list[dict]:
    """Threshold rules: over budget -> warning, >80% -> caution, then top category info."""
    insights = []
    for s in statuses:
        if s["isOverBudget"]:
            insights.append({
                "type": InsightType.WARNING.value,
                "message": (
                    f"You're over budget in {s['name']} by ${s['overBy']:.2f}"
                ),
            })
        elif s["percentage"] > CAUTION_THRESHOLD:
            insights.append({
                "type": InsightType.CAUTION.value,
                "message": (
                    f"You've used {round_half_up_int(s['percentage'])}% "
                    f"of your {s['name']} budget"
                ),
            })

    if totals:
        # first maximum wins on ties
        top = max(totals, key=lambda t: t["amount"])
        insights.append({
            "type": InsightType.INFO.value,
            "message": (
                f"Your highest spending category this period is "
                f"{top['name']} (${top['amount']:.2f})"
            ),
        })
    return insights


def summarize_expenses(
    expenses: Iterable[ExpenseLike],
    budgets: Iterable[BudgetLike],
    window: DateWindow,
    today: date,
    category: str | None = None,
    include_recurring: bool = True,
) -> dict:
    """Full dashboard payload for one user. Pure, no IO."""
    expenses = list(expenses)
    filtered = filter_expenses(
        expenses, window, today, category, include_recurring,
    )
    totals = category_totals(filtered)
    statuses = budget_status(budgets, filtered)
    trend_source = [
        e for e in expenses if category is None or e.category == category
    ]
    return {
        "window": window.value,
        "count": len(filtered),
        "total": to_cents(total_spent(filtered)),
        "categoryTotals": totals,
        "budgetStatus": statuses,
        "monthlyTrend": monthly_trend(trend_source),
        "insights": build_insights(statuses, totals),
    }
