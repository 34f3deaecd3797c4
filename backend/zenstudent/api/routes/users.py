"""User Routes - the caller's profile and summary statistics.

Invariants:
    - Responses never carry the password hash
    - PUT applies only the fields present in the body; "password" is not updatable here
    - Changing email to one owned by another account -> 400 DuplicateEmailError
    - Stats are recomputed from the owned collections on every call
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from zenstudent.api.deps import get_current_user_id
from zenstudent.core.domain_types import UserId
from zenstudent.core.errors import DuplicateEmailError, ResourceNotFoundError
from zenstudent.core.user_stats import compute_user_stats
from zenstudent.infrastructure.database import get_db
from zenstudent.models.expense import Expense
from zenstudent.models.goal import Goal
from zenstudent.models.mood_entry import MoodEntry
from zenstudent.models.user import User
from zenstudent.schemas.user import ProfileResponse, ProfileUpdate, StatsResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/user", tags=["user"])


async def _get_user_or_404(db: AsyncSession, user_id: UserId) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return user


async def _email_taken(db: AsyncSession, email: str, user_id: UserId) -> bool:
    owner = await db.scalar(
        select(User.id).where(User.email == email, User.id != user_id),
    )
    return owner is not None


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await _get_user_or_404(db, user_id)


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    body: ProfileUpdate,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Partial profile update."""
    user = await _get_user_or_404(db, user_id)
    changes = body.model_dump(exclude_unset=True, exclude_none=True)

    new_email = changes.get("email")
    if new_email and new_email != user.email:
        if await _email_taken(db, new_email, user_id):
            raise DuplicateEmailError()

    for name, value in changes.items():
        setattr(user, name, value)
    try:
        await db.commit()
    except IntegrityError:
        # another account claimed the email after the check above
        await db.rollback()
        raise DuplicateEmailError()
    await db.refresh(user)
    logger.info(
        f"Profile updated ({', '.join(sorted(changes)) or 'no changes'})",
        extra={"user_id": user_id},
    )
    return user


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    user = await _get_user_or_404(db, user_id)
    mood_count = await db.scalar(
        select(func.count()).select_from(MoodEntry).where(
            MoodEntry.user_id == user_id,
        ),
    )
    goals = (await db.execute(
        select(Goal).where(Goal.user_id == user_id),
    )).scalars().all()
    expenses = (await db.execute(
        select(Expense).where(Expense.user_id == user_id),
    )).scalars().all()

    stats = compute_user_stats(
        mood_count or 0, goals, expenses, user.join_date,
        datetime.now(timezone.utc),
    )
    return StatsResponse.model_validate(stats)
