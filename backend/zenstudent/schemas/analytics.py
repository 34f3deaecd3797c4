"""Analytics Schemas - typed dashboard payloads for /api/analytics/*.

Invariants:
    - Field names mirror the core reductions' camelCase keys, so a core dict
      validates straight into these models
    - Money and percentages are JSON numbers
"""

from uuid import UUID

from zenstudent.schemas.base import CamelModel
from zenstudent.schemas.goal import GoalResponse


# ─── Expenses ────────────────────────────────────────────────────

class CategoryTotal(CamelModel):
    category: str
    name: str
    amount: float


class BudgetStatus(CamelModel):
    id: UUID | None = None
    category: str
    name: str
    amount: float
    spent: float
    percentage: float
    remaining: float
    over_by: float
    is_over_budget: bool


class MonthlyTotal(CamelModel):
    key: str
    month: str
    amount: float


class Insight(CamelModel):
    type: str
    message: str


class ExpenseSummary(CamelModel):
    window: str
    count: int
    total: float
    category_totals: list[CategoryTotal]
    budget_status: list[BudgetStatus]
    monthly_trend: list[MonthlyTotal]
    insights: list[Insight]


# ─── Moods ───────────────────────────────────────────────────────

class MoodCount(CamelModel):
    emoji: str
    name: str
    value: int
    color: str
    count: int


class MoodTrendPoint(CamelModel):
    """One chart point; yearly points carry a monthly average."""
    date: str
    mood: int | float
    full_date: str


class MoodSummary(CamelModel):
    period: str
    count: int
    average: float
    distribution: list[MoodCount]
    streak: int
    trend: list[MoodTrendPoint]


# ─── Goals ───────────────────────────────────────────────────────

class ProgressBucket(CamelModel):
    name: str
    value: int


class GoalCategoryCount(CamelModel):
    category: str
    name: str
    total: int
    completed: int


class PriorityCount(CamelModel):
    priority: str
    count: int


class CategoryPerformance(CamelModel):
    category: str
    progress: int
    full_mark: int


class GoalSummary(CamelModel):
    period: str
    count: int
    progress: list[ProgressBucket]
    categories: list[GoalCategoryCount]
    priorities: list[PriorityCount]
    performance: list[CategoryPerformance]
    due_today: list[GoalResponse]
    overdue: list[GoalResponse]
