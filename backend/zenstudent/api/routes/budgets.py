"""Budget Routes - one spending cap per (caller, category).

Invariants:
    - POST upserts by category: 201 when a row was inserted, 200 when updated
    - GET never returns two budgets for the same category
    - DELETE of another user's budget -> 404
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zenstudent.api.deps import get_current_user_id, get_owned_or_404
from zenstudent.core.domain_types import UserId
from zenstudent.infrastructure.database import get_db
from zenstudent.models.budget import Budget
from zenstudent.schemas.base import MessageResponse
from zenstudent.schemas.expense import BudgetResponse, BudgetWrite
from zenstudent.services.budget_upsert import upsert_budget

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/budgets", tags=["budgets"])


@router.get("", response_model=list[BudgetResponse])
async def list_budgets(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(Budget)
        .where(Budget.user_id == user_id)
        .order_by(Budget.category),
    )
    return result.scalars().all()


@router.post(
    "", response_model=BudgetResponse, status_code=status.HTTP_201_CREATED,
)
async def save_budget(
    body: BudgetWrite,
    response: Response,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create the category's budget, or update it if one already exists."""
    budget, created = await upsert_budget(db, user_id, body)
    if not created:
        response.status_code = status.HTTP_200_OK
    return budget


@router.delete("/{budget_id}", response_model=MessageResponse)
async def delete_budget(
    budget_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    budget = await get_owned_or_404(db, Budget, budget_id, user_id)
    await db.delete(budget)
    await db.commit()
    logger.info(
        f"Budget deleted: {budget.category}",
        extra={"user_id": user_id, "resource_id": budget_id},
    )
    return MessageResponse(message="Budget deleted")
