"""Budget Upsert - create-or-update the caller's budget for one category.

Invariants:
    - A single INSERT ... ON CONFLICT (user_id, category) DO UPDATE statement:
      two concurrent POSTs for one category can never leave two rows
    - Returns (budget, created) so the route can answer 201 vs 200
    - The row returned is re-read after commit, never the stale identity-map copy

Design Decisions:
    - Dialect-specific insert() chosen at runtime (PostgreSQL in production,
      SQLite in tests); any other backend is refused with DatabaseError
"""

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from zenstudent.core.domain_types import UserId
from zenstudent.core.errors import DatabaseError
from zenstudent.models.budget import Budget
from zenstudent.schemas.expense import BudgetWrite

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def upsert_budget(
    db: AsyncSession, user_id: UserId, body: BudgetWrite,
) -> tuple[Budget, bool]:
    """Insert or update the (user_id, body.category) budget. Commits."""
    dialect = (await db.connection()).dialect.name
    insert = _DIALECT_INSERTS.get(dialect)
    if insert is None:
        raise DatabaseError(f"upsert unsupported on {dialect}", "upsert")

    owned = (Budget.user_id == user_id, Budget.category == body.category)
    existing_id = await db.scalar(select(Budget.id).where(*owned))

    updates = {
        "amount": body.amount,
        "period": body.period.value,
        "start_date": body.start_date,
    }
    stmt = insert(Budget).values(
        id=uuid.uuid4(),
        user_id=user_id,
        category=body.category,
        created_at=datetime.now(timezone.utc),
        **updates,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Budget.user_id, Budget.category], set_=updates,
    )
    await db.execute(stmt)
    await db.commit()

    budget = await db.scalar(
        select(Budget).where(*owned).execution_options(populate_existing=True),
    )
    created = existing_id is None
    logger.info(
        f"Budget {'created' if created else 'updated'} for {body.category}",
        extra={"user_id": user_id, "resource_id": budget.id},
    )
    return budget, created
