"""Record Protocols - structural contracts for the records core functions reduce over.

Invariants:
    - Core NEVER imports ORM models; dependency arrows point inward only
    - Each protocol lists only the attributes the analytics actually read

Design Decisions:
    - Protocol over ABC: ORM rows, dataclasses and test doubles all satisfy it structurally
"""

from datetime import date
from decimal import Decimal
from typing import Protocol


class MoodLike(Protocol):
    mood: int
    date: date


class CustomMoodLike(Protocol):
    emoji: str
    name: str
    value: int
    color: str


class GoalLike(Protocol):
    category: str
    priority: str
    target_value: float
    current_value: float
    completed: bool
    due_date: date | None
    created_date: date


class ExpenseLike(Protocol):
    amount: Decimal
    category: str
    date: date
    is_recurring: bool


class BudgetLike(Protocol):
    category: str
    amount: Decimal
