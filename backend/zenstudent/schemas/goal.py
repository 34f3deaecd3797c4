"""Goal Schemas - goal documents, progress updates and the derived progress field.

Invariants:
    - targetValue > 0 (a zero target would make progress undefined)
    - currentValue >= 0
    - dueDate accepts "" or null for "no deadline"
    - GoalWrite is a full replacement document: PUT bodies carry every field
    - GoalResponse.progress is derived on read, never stored
"""

from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import Field, computed_field, field_validator

from zenstudent.core.goal_progress import progress_percentage
from zenstudent.schemas.base import CamelModel, utc_today

Priority = Literal["low", "medium", "high", "urgent"]


class GoalWrite(CamelModel):
    """Body for POST /api/goals and PUT /api/goals/{id}."""
    title: str = Field(min_length=1, max_length=200)
    description: str = Field("", max_length=2000)
    category: str = Field(min_length=1, max_length=40)
    priority: Priority = "medium"
    target_value: float = Field(gt=0)
    current_value: float = Field(0, ge=0)
    unit: str = Field("%", max_length=40)
    due_date: date | None = None
    created_date: date = Field(default_factory=utc_today)
    completed: bool = False
    tags: list[str] = Field(default_factory=list, max_length=20)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date(cls, v):
        return None if v == "" else v


class GoalProgressUpdate(CamelModel):
    current_value: float


class GoalResponse(CamelModel):
    id: UUID
    title: str
    description: str
    category: str
    priority: str
    target_value: float
    current_value: float
    unit: str
    due_date: date | None
    created_date: date
    completed: bool
    tags: list[str]
    created_at: datetime

    @computed_field
    @property
    def progress(self) -> int:
        return progress_percentage(self.current_value, self.target_value)
