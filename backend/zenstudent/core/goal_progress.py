"""Goal Progress - completion rules and chart reductions for goals.

Invariants:
    - All functions are PURE: no IO, no clock reads (today is passed in)
    - The stored completed flag is authoritative; nothing here derives it lazily
    - toggle_completion: marking complete sets current to target, un-marking
      leaves current untouched
    - apply_progress clamps into [0, target] and sets completed = value >= target
    - progress_percentage never divides by zero (target <= 0 -> 0)

Design Decisions:
    - Mutations return (current_value, completed) tuples; the shell writes them
      to the ORM row so the rules stay testable without a database
"""

from collections.abc import Iterable
from datetime import date, timedelta

from zenstudent.core.domain_types import (
    TrendPeriod, GOAL_CATEGORIES, GOAL_PRIORITIES,
)
from zenstudent.core.record_protocols import GoalLike
from zenstudent.core.rounding import round_half_up_int


# ─── Completion Rules ────────────────────────────────────────────

def progress_percentage(current_value: float, target_value: float) -> int:
    """round(current / target * 100), halves rounded up."""
    if target_value <= 0:
        return 0
    return round_half_up_int(current_value / target_value * 100)


def toggle_completion(goal: GoalLike) -> tuple[float, bool]:
    """New (current_value, completed) after flipping completion."""
    if goal.completed:
        return goal.current_value, False
    return goal.target_value, True


def apply_progress(goal: GoalLike, new_value: float) -> tuple[float, bool]:
    """New (current_value, completed) after setting progress to new_value."""
    clamped = min(max(new_value, 0), goal.target_value)
    return clamped, clamped >= goal.target_value


# ─── Due Dates ───────────────────────────────────────────────────

def due_today(goals: Iterable[GoalLike], today: date) -> list[GoalLike]:
    return [g for g in goals if not g.completed and g.due_date == today]


def overdue(goals: Iterable[GoalLike], today: date) -> list[GoalLike]:
    return [
        g for g in goals
        if not g.completed and g.due_date is not None and g.due_date < today
    ]


# ─── Chart Data ──────────────────────────────────────────────────

def filter_goals(
    goals: Iterable[GoalLike],
    period: TrendPeriod,
    today: date,
    category: str | None = None,
) -> list[GoalLike]:
    """Goals created inside the period, optionally limited to one category."""
    selected = []
    for g in goals:
        if category is not None and g.category != category:
            continue
        created = g.created_date
        if period == TrendPeriod.WEEKLY and created < today - timedelta(days=7):
            continue
        if period == TrendPeriod.MONTHLY and (
            (created.year, created.month) != (today.year, today.month)
        ):
            continue
        if period == TrendPeriod.YEARLY and created.year != today.year:
            continue
        selected.append(g)
    return selected


def progress_breakdown(goals: list[GoalLike]) -> list[dict]:
    buckets = [
        ("Completed", sum(1 for g in goals if g.completed)),
        ("In Progress", sum(
            1 for g in goals if not g.completed and g.current_value > 0
        )),
        ("Not Started", sum(
            1 for g in goals if not g.completed and g.current_value == 0
        )),
    ]
    return [{"name": name, "value": n} for name, n in buckets if n > 0]


def category_breakdown(goals: list[GoalLike]) -> list[dict]:
    rows = []
    for cat in GOAL_CATEGORIES:
        in_cat = [g for g in goals if g.category == cat.id]
        if in_cat:
            rows.append({
                "category": cat.id,
                "name": cat.name,
                "total": len(in_cat),
                "completed": sum(1 for g in in_cat if g.completed),
            })
    return rows


def priority_breakdown(goals: list[GoalLike]) -> list[dict]:
    rows = []
    for pid, name in GOAL_PRIORITIES:
        count = sum(1 for g in goals if g.priority == pid)
        if count:
            rows.append({"priority": name, "count": count})
    return rows


def category_performance(goals: list[GoalLike]) -> list[dict]:
    """Average progress per category; categories averaging 0 are dropped."""
    rows = []
    for cat in GOAL_CATEGORIES:
        in_cat = [g for g in goals if g.category == cat.id]
        if not in_cat:
            continue
        ratios = [
            g.current_value / g.target_value * 100 if g.target_value > 0 else 0
            for g in in_cat
        ]
        avg = round_half_up_int(sum(ratios) / len(ratios))
        if avg > 0:
            rows.append({"category": cat.name, "progress": avg, "fullMark": 100})
    return rows


def summarize_goals(
    goals: Iterable[GoalLike],
    period: TrendPeriod,
    today: date,
    category: str | None = None,
) -> dict:
    """All goal chart views for one filter selection. Pure, no IO."""
    selected = filter_goals(goals, period, today, category)
    return {
        "period": period.value,
        "count": len(selected),
        "progress": progress_breakdown(selected),
        "categories": category_breakdown(selected),
        "priorities": priority_breakdown(selected),
        "performance": category_performance(selected),
    }
