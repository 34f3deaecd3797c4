"""Expense & Budget Schemas - spending records and per-category caps.

Invariants:
    - amount > 0 with at most 2 decimal places (cents)
    - Budget period is weekly / monthly / yearly
    - Money leaves the API as JSON numbers, not strings
"""

import datetime as dt
from decimal import Decimal
from uuid import UUID

from pydantic import Field

from zenstudent.core.domain_types import BudgetPeriod
from zenstudent.schemas.base import CamelModel, utc_today


class ExpenseWrite(CamelModel):
    """Body for POST /api/expenses and PUT /api/expenses/{id}."""
    title: str = Field(min_length=1, max_length=200)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    category: str = Field(min_length=1, max_length=40)
    date: dt.date = Field(default_factory=utc_today)
    description: str = Field("", max_length=2000)
    is_recurring: bool = False
    recurring_period: str = Field("", max_length=20)


class ExpenseResponse(CamelModel):
    id: UUID
    title: str
    amount: float
    category: str
    date: dt.date
    description: str
    is_recurring: bool
    recurring_period: str
    created_at: dt.datetime


class BudgetWrite(CamelModel):
    category: str = Field(min_length=1, max_length=40)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    period: BudgetPeriod = BudgetPeriod.MONTHLY
    start_date: dt.date = Field(default_factory=utc_today)


class BudgetResponse(CamelModel):
    id: UUID
    category: str
    amount: float
    period: str
    start_date: dt.date
    created_at: dt.datetime
