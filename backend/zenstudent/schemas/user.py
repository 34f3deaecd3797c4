"""Profile Schemas - profile read/update and the stats summary.

Invariants:
    - ProfileResponse has no password field of any kind
    - ProfileUpdate is partial: only fields present in the body are written
    - Unknown keys in ProfileUpdate (including "password") are ignored
"""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from zenstudent.schemas.base import CamelModel


class ProfileResponse(CamelModel):
    id: UUID
    full_name: str
    email: str
    phone: str
    university: str
    major: str
    year: str
    bio: str
    join_date: datetime
    created_at: datetime


class ProfileUpdate(CamelModel):
    full_name: str | None = Field(None, min_length=2, max_length=120)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=40)
    university: str | None = Field(None, max_length=200)
    major: str | None = Field(None, max_length=200)
    year: str | None = Field(None, max_length=40)
    bio: str | None = Field(None, max_length=2000)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class StatsResponse(CamelModel):
    mood_entries: int
    active_goals: int
    completed_goals: int
    total_spent: float
    days_active: int
