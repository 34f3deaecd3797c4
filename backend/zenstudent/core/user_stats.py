"""User Stats - pure computation of the profile summary counters.

Invariants:
    - All inputs are passed in (no IO, no DB, no clock reads)
    - activeGoals + completedGoals == number of goals
    - daysActive is floored to whole days and never negative
    - Naive join timestamps are treated as UTC

Design Decisions:
    - Pure function, not an ORM method: stats are presentation, models are persistence
    - Keys are the camelCase names the client reads, so routes return the dict as-is
"""

from collections.abc import Iterable
from datetime import datetime, timezone
from decimal import Decimal

from zenstudent.core.record_protocols import ExpenseLike, GoalLike
from zenstudent.core.rounding import to_cents


def days_since(joined: datetime, now: datetime) -> int:
    """Whole days elapsed between joined and now, floored at zero."""
    if joined.tzinfo is None:
        joined = joined.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return max((now - joined).days, 0)


def compute_user_stats(
    mood_count: int,
    goals: Iterable[GoalLike],
    expenses: Iterable[ExpenseLike],
    join_date: datetime,
    now: datetime,
) -> dict:
    """Compute summary statistics for one user. Pure, no IO."""
    goals = list(goals)
    completed = sum(1 for g in goals if g.completed)
    total_spent = sum((Decimal(e.amount) for e in expenses), Decimal("0"))

    return {
        "moodEntries": mood_count,
        "activeGoals": len(goals) - completed,
        "completedGoals": completed,
        "totalSpent": to_cents(total_spent),
        "daysActive": days_since(join_date, now),
    }
