"""Goal ORM - a tracked personal goal with manual progress.

Invariants:
    - Always belongs to a User (user_id FK)
    - target_value > 0 (enforced at the API boundary)
    - completed is stored explicitly; it is NOT derived from current/target
    - tags is a JSON list of strings

Design Decisions:
    - due_date nullable: goals without a deadline never count as overdue
    - created_date (calendar day) kept apart from created_at (timestamp): charts
      bucket by the day the client reports, ordering uses the timestamp
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import String, Text, Float, Boolean, Date, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from zenstudent.db.base import Base


class Goal(Base):
    """Goal entity - progress toward a numeric target."""
    __tablename__ = "goals"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(String(40), nullable=False)
    priority: Mapped[str] = mapped_column(String(20), nullable=False)
    target_value: Mapped[float] = mapped_column(Float, nullable=False)
    current_value: Mapped[float] = mapped_column(
        Float, nullable=False, default=0,
    )
    unit: Mapped[str] = mapped_column(String(40), nullable=False, default="%")
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_date: Mapped[date] = mapped_column(Date, nullable=False)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
