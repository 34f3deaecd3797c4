"""Mood Schemas - mood entries and custom mood categories."""

import datetime as dt
from uuid import UUID

from pydantic import Field

from zenstudent.core.domain_types import CUSTOM_MOOD_COLOR
from zenstudent.schemas.base import CamelModel, utc_today


class MoodCreate(CamelModel):
    mood: int = Field(ge=1, le=5)
    note: str = Field("", max_length=2000)
    date: dt.date = Field(default_factory=utc_today)


class MoodResponse(CamelModel):
    id: UUID
    mood: int
    note: str
    date: dt.date
    created_at: dt.datetime


class CustomMoodCreate(CamelModel):
    emoji: str = Field(min_length=1, max_length=16)
    name: str = Field(min_length=1, max_length=60)
    value: int = Field(3, ge=1, le=5)
    color: str = Field(CUSTOM_MOOD_COLOR, pattern=r"^#[0-9A-Fa-f]{6}$")


class CustomMoodResponse(CamelModel):
    id: UUID
    emoji: str
    name: str
    value: int
    color: str
    created_at: dt.datetime
