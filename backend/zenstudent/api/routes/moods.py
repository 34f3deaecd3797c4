"""Mood Routes - mood log entries and user-defined mood categories.

Invariants:
    - Every query filters on the caller's user_id
    - GET /api/moods is newest first (created_at desc)
    - DELETE of another user's entry -> 404, the entry survives
    - Custom moods are create + list only
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zenstudent.api.deps import get_current_user_id, get_owned_or_404
from zenstudent.core.domain_types import UserId
from zenstudent.infrastructure.database import get_db
from zenstudent.models.custom_mood import CustomMood
from zenstudent.models.mood_entry import MoodEntry
from zenstudent.schemas.base import MessageResponse
from zenstudent.schemas.mood import (
    CustomMoodCreate, CustomMoodResponse, MoodCreate, MoodResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["moods"])


# ─── Mood Entries ────────────────────────────────────────────────

@router.get("/moods", response_model=list[MoodResponse])
async def list_moods(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(MoodEntry)
        .where(MoodEntry.user_id == user_id)
        .order_by(MoodEntry.created_at.desc()),
    )
    return result.scalars().all()


@router.post(
    "/moods", response_model=MoodResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_mood(
    body: MoodCreate,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    entry = MoodEntry(user_id=user_id, **body.model_dump())
    db.add(entry)
    await db.commit()
    await db.refresh(entry)
    logger.info(
        f"Mood entry logged ({entry.mood})",
        extra={"user_id": user_id, "resource_id": entry.id},
    )
    return entry


@router.delete("/moods/{mood_id}", response_model=MessageResponse)
async def delete_mood(
    mood_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    entry = await get_owned_or_404(db, MoodEntry, mood_id, user_id)
    await db.delete(entry)
    await db.commit()
    logger.info(
        "Mood entry deleted",
        extra={"user_id": user_id, "resource_id": mood_id},
    )
    return MessageResponse(message="Mood deleted")


# ─── Custom Moods ────────────────────────────────────────────────

@router.get("/custom-moods", response_model=list[CustomMoodResponse])
async def list_custom_moods(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(CustomMood)
        .where(CustomMood.user_id == user_id)
        .order_by(CustomMood.created_at),
    )
    return result.scalars().all()


@router.post(
    "/custom-moods", response_model=CustomMoodResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_custom_mood(
    body: CustomMoodCreate,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    mood = CustomMood(user_id=user_id, **body.model_dump())
    db.add(mood)
    await db.commit()
    await db.refresh(mood)
    logger.info(
        f"Custom mood created: {mood.name}",
        extra={"user_id": user_id, "resource_id": mood.id},
    )
    return mood
