"""Analytics Routes - read-only dashboards computed from the caller's records.

Invariants:
    - Nothing here writes: every payload is recomputed per request
    - All reductions live in core/ (pure); this module only loads rows and
      supplies today's date
    - "today" is the UTC calendar day
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zenstudent.api.deps import get_current_user_id
from zenstudent.core.domain_types import DateWindow, TrendPeriod, UserId
from zenstudent.core.expense_analytics import summarize_expenses
from zenstudent.core.goal_progress import due_today, overdue, summarize_goals
from zenstudent.core.mood_analytics import summarize_moods
from zenstudent.infrastructure.database import get_db
from zenstudent.models.budget import Budget
from zenstudent.models.custom_mood import CustomMood
from zenstudent.models.expense import Expense
from zenstudent.models.goal import Goal
from zenstudent.models.mood_entry import MoodEntry
from zenstudent.schemas.analytics import ExpenseSummary, GoalSummary, MoodSummary
from zenstudent.schemas.base import utc_today
from zenstudent.schemas.goal import GoalResponse

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


async def _owned(db: AsyncSession, model, user_id: UserId) -> list:
    result = await db.execute(select(model).where(model.user_id == user_id))
    return list(result.scalars().all())


@router.get("/expenses", response_model=ExpenseSummary)
async def expense_analytics(
    window: DateWindow = Query(DateWindow.MONTH),
    category: str | None = Query(None),
    include_recurring: bool = Query(True, alias="includeRecurring"),
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Totals, budget status, six-month trend and insights for one window."""
    expenses = await _owned(db, Expense, user_id)
    budgets = await _owned(db, Budget, user_id)
    summary = summarize_expenses(
        expenses, budgets, window, utc_today(),
        category=None if category in (None, "", "all") else category,
        include_recurring=include_recurring,
    )
    return ExpenseSummary.model_validate(summary)


@router.get("/moods", response_model=MoodSummary)
async def mood_analytics(
    period: TrendPeriod = Query(TrendPeriod.WEEKLY),
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    entries = await _owned(db, MoodEntry, user_id)
    custom = await _owned(db, CustomMood, user_id)
    return MoodSummary.model_validate(
        summarize_moods(entries, custom, period, utc_today()),
    )


@router.get("/goals", response_model=GoalSummary)
async def goal_analytics(
    period: TrendPeriod = Query(TrendPeriod.ALL),
    category: str | None = Query(None),
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Chart breakdowns plus the goals due today and overdue."""
    goals = await _owned(db, Goal, user_id)
    today = utc_today()
    summary = summarize_goals(
        goals, period, today,
        category=None if category in (None, "", "all") else category,
    )
    return GoalSummary.model_validate({
        **summary,
        "dueToday": [GoalResponse.model_validate(g) for g in due_today(goals, today)],
        "overdue": [GoalResponse.model_validate(g) for g in overdue(goals, today)],
    })
