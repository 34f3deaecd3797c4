"""Expense Routes - expense CRUD scoped to the caller.

Invariants:
    - GET lists newest first; ?date=YYYY-MM-DD narrows to one calendar day
    - PUT replaces the whole document (ExpenseWrite)
    - Another user's expense id -> 404 on PUT and DELETE
"""

import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zenstudent.api.deps import get_current_user_id, get_owned_or_404
from zenstudent.core.domain_types import UserId
from zenstudent.infrastructure.database import get_db
from zenstudent.models.expense import Expense
from zenstudent.schemas.base import MessageResponse
from zenstudent.schemas.expense import ExpenseResponse, ExpenseWrite

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(
    on: date | None = Query(None, alias="date"),
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    query = select(Expense).where(Expense.user_id == user_id)
    if on is not None:
        query = query.where(Expense.date == on)
    result = await db.execute(query.order_by(Expense.created_at.desc()))
    return result.scalars().all()


@router.post(
    "", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED,
)
async def create_expense(
    body: ExpenseWrite,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    expense = Expense(user_id=user_id, **body.model_dump())
    db.add(expense)
    await db.commit()
    await db.refresh(expense)
    logger.info(
        f"Expense created: {expense.title}",
        extra={"user_id": user_id, "resource_id": expense.id},
    )
    return expense


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: UUID,
    body: ExpenseWrite,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    expense = await get_owned_or_404(db, Expense, expense_id, user_id)
    for name, value in body.model_dump().items():
        setattr(expense, name, value)
    await db.commit()
    await db.refresh(expense)
    logger.info(
        f"Expense updated: {expense.title}",
        extra={"user_id": user_id, "resource_id": expense_id},
    )
    return expense


@router.delete("/{expense_id}", response_model=MessageResponse)
async def delete_expense(
    expense_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    expense = await get_owned_or_404(db, Expense, expense_id, user_id)
    await db.delete(expense)
    await db.commit()
    logger.info(
        "Expense deleted",
        extra={"user_id": user_id, "resource_id": expense_id},
    )
    return MessageResponse(message="Expense deleted")
