"""ORM Models - SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the owner of every other entity; all rows scoped by user_id

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from zenstudent.models.user import User  # noqa: F401
from zenstudent.models.mood_entry import MoodEntry  # noqa: F401
from zenstudent.models.custom_mood import CustomMood  # noqa: F401
from zenstudent.models.goal import Goal  # noqa: F401
from zenstudent.models.expense import Expense  # noqa: F401
from zenstudent.models.budget import Budget  # noqa: F401
