"""Goal Routes - goal CRUD plus the completion toggle and progress update.

Invariants:
    - Every query filters on the caller's user_id; foreign ids -> 404
    - PUT replaces the whole document (GoalWrite); targetValue must be > 0
    - The completed flag is only ever written explicitly: by the client on
      POST/PUT, or by the toggle/progress rules in core/goal_progress.py
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zenstudent.api.deps import get_current_user_id, get_owned_or_404
from zenstudent.core.domain_types import UserId
from zenstudent.core.goal_progress import apply_progress, toggle_completion
from zenstudent.infrastructure.database import get_db
from zenstudent.models.goal import Goal
from zenstudent.schemas.base import MessageResponse
from zenstudent.schemas.goal import GoalProgressUpdate, GoalResponse, GoalWrite

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/goals", tags=["goals"])


async def _save(db: AsyncSession, goal: Goal) -> Goal:
    await db.commit()
    await db.refresh(goal)
    return goal


@router.get("", response_model=list[GoalResponse])
async def list_goals(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(Goal)
        .where(Goal.user_id == user_id)
        .order_by(Goal.created_at.desc()),
    )
    return result.scalars().all()


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(
    body: GoalWrite,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    goal = Goal(user_id=user_id, **body.model_dump())
    db.add(goal)
    await _save(db, goal)
    logger.info(
        f"Goal created: {goal.title}",
        extra={"user_id": user_id, "resource_id": goal.id},
    )
    return goal


@router.put("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: UUID,
    body: GoalWrite,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Replace every editable field of the goal."""
    goal = await get_owned_or_404(db, Goal, goal_id, user_id)
    for name, value in body.model_dump().items():
        setattr(goal, name, value)
    await _save(db, goal)
    logger.info(
        f"Goal updated: {goal.title}",
        extra={"user_id": user_id, "resource_id": goal_id},
    )
    return goal


@router.patch("/{goal_id}/toggle", response_model=GoalResponse)
async def toggle_goal(
    goal_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Flip completion; marking complete fills current value up to target."""
    goal = await get_owned_or_404(db, Goal, goal_id, user_id)
    goal.current_value, goal.completed = toggle_completion(goal)
    await _save(db, goal)
    logger.info(
        f"Goal {'completed' if goal.completed else 'reopened'}: {goal.title}",
        extra={"user_id": user_id, "resource_id": goal_id},
    )
    return goal


@router.patch("/{goal_id}/progress", response_model=GoalResponse)
async def set_goal_progress(
    goal_id: UUID,
    body: GoalProgressUpdate,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    goal = await get_owned_or_404(db, Goal, goal_id, user_id)
    goal.current_value, goal.completed = apply_progress(goal, body.current_value)
    await _save(db, goal)
    logger.info(
        f"Goal progress set to {goal.current_value}/{goal.target_value}",
        extra={"user_id": user_id, "resource_id": goal_id},
    )
    return goal


@router.delete("/{goal_id}", response_model=MessageResponse)
async def delete_goal(
    goal_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    goal = await get_owned_or_404(db, Goal, goal_id, user_id)
    await db.delete(goal)
    await db.commit()
    logger.info(
        "Goal deleted", extra={"user_id": user_id, "resource_id": goal_id},
    )
    return MessageResponse(message="Goal deleted")
