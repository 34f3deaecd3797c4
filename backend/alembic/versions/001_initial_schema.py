"""Initial schema - users, mood_entries, custom_moods, goals, expenses, budgets.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _owner() -> sa.Column:
    return sa.Column(
        "user_id", UUID(as_uuid=True), sa.ForeignKey("users.id"), nullable=False,
    )


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), nullable=False,
        server_default=sa.func.now(),
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("full_name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(40), nullable=False, server_default=""),
        sa.Column("university", sa.String(200), nullable=False, server_default=""),
        sa.Column("major", sa.String(200), nullable=False, server_default=""),
        sa.Column("year", sa.String(40), nullable=False, server_default=""),
        sa.Column("bio", sa.Text, nullable=False, server_default=""),
        sa.Column("join_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        _created_at(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "mood_entries",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        _owner(),
        sa.Column("mood", sa.Integer, nullable=False),
        sa.Column("note", sa.Text, nullable=False, server_default=""),
        sa.Column("date", sa.Date, nullable=False),
        _created_at(),
    )
    op.create_index("ix_mood_entries_user_id", "mood_entries", ["user_id"])

    op.create_table(
        "custom_moods",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        _owner(),
        sa.Column("emoji", sa.String(16), nullable=False),
        sa.Column("name", sa.String(60), nullable=False),
        sa.Column("value", sa.Integer, nullable=False),
        sa.Column("color", sa.String(20), nullable=False, server_default="#9C27B0"),
        _created_at(),
    )
    op.create_index("ix_custom_moods_user_id", "custom_moods", ["user_id"])

    op.create_table(
        "goals",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        _owner(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("category", sa.String(40), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False),
        sa.Column("target_value", sa.Float, nullable=False),
        sa.Column("current_value", sa.Float, nullable=False, server_default="0"),
        sa.Column("unit", sa.String(40), nullable=False, server_default="%"),
        sa.Column("due_date", sa.Date, nullable=True),
        sa.Column("created_date", sa.Date, nullable=False),
        sa.Column("completed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("tags", sa.JSON, nullable=False),
        _created_at(),
    )
    op.create_index("ix_goals_user_id", "goals", ["user_id"])

    op.create_table(
        "expenses",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        _owner(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("category", sa.String(40), nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("is_recurring", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("recurring_period", sa.String(20), nullable=False, server_default=""),
        _created_at(),
    )
    op.create_index("ix_expenses_user_id", "expenses", ["user_id"])
    op.create_index("ix_expenses_date", "expenses", ["date"])

    op.create_table(
        "budgets",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        _owner(),
        sa.Column("category", sa.String(40), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("period", sa.String(20), nullable=False),
        sa.Column("start_date", sa.Date, nullable=False),
        _created_at(),
        sa.UniqueConstraint("user_id", "category", name="uq_budgets_user_category"),
    )
    op.create_index("ix_budgets_user_id", "budgets", ["user_id"])


def downgrade() -> None:
    op.drop_table("budgets")
    op.drop_table("expenses")
    op.drop_table("goals")
    op.drop_table("custom_moods")
    op.drop_table("mood_entries")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
