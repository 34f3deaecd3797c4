"""User ORM - account credentials and profile fields.

Invariants:
    - id is UUID primary key
    - email is unique and stored lower-cased
    - password_hash is a bcrypt hash; the plaintext is never stored
    - profile fields default to empty strings, never NULL

Design Decisions:
    - No ORM relationships to owned records: every owned table is queried with
      an explicit user_id filter, and deleting a user cascades nothing
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from zenstudent.db.base import Base


class User(Base):
    """Registered student account."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    full_name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    phone: Mapped[str] = mapped_column(String(40), nullable=False, default="")
    university: Mapped[str] = mapped_column(
        String(200), nullable=False, default="",
    )
    major: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    year: Mapped[str] = mapped_column(String(40), nullable=False, default="")
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")

    join_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
