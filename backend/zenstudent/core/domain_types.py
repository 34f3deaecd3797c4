"""Domain Types - identity types, enums and display catalogs shared across layers.

Invariants:
    - UserId wraps UUID; core functions never take bare strings for identity
    - Every closed vocabulary (windows, periods, priorities) is a str Enum
    - Display catalogs are ordered; analytics output follows catalog order

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders, accepted directly by Pydantic
"""

from enum import Enum
from typing import NamedTuple, NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class DateWindow(str, Enum):
    """Expense filter window. WEEK is a rolling 7 days, MONTH/YEAR are calendar."""
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


class TrendPeriod(str, Enum):
    """Goal and mood chart period."""
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ALL = "all"


class BudgetPeriod(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class InsightType(str, Enum):
    """Severity of a budget insight: >100% warning, >80% caution, else info."""
    WARNING = "warning"
    CAUTION = "caution"
    INFO = "info"


# ─── Display Catalogs ────────────────────────────────────────────

class CatalogEntry(NamedTuple):
    id: str
    name: str
    icon: str


EXPENSE_CATEGORIES: tuple[CatalogEntry, ...] = (
    CatalogEntry("food", "Food & Dining", "🍕"),
    CatalogEntry("transport", "Transportation", "🚌"),
    CatalogEntry("education", "Education", "📚"),
    CatalogEntry("entertainment", "Entertainment", "🎬"),
    CatalogEntry("shopping", "Shopping", "🛍️"),
    CatalogEntry("health", "Health & Fitness", "💊"),
    CatalogEntry("utilities", "Utilities", "💡"),
    CatalogEntry("rent", "Rent & Housing", "🏠"),
    CatalogEntry("other", "Other", "📦"),
)

GOAL_CATEGORIES: tuple[CatalogEntry, ...] = (
    CatalogEntry("academic", "Academic", "📚"),
    CatalogEntry("fitness", "Fitness", "💪"),
    CatalogEntry("personal", "Personal", "🌱"),
    CatalogEntry("career", "Career", "💼"),
    CatalogEntry("financial", "Financial", "💰"),
    CatalogEntry("social", "Social", "👥"),
)

# (id, display name), lowest to highest urgency
GOAL_PRIORITIES: tuple[tuple[str, str], ...] = (
    ("low", "Low"),
    ("medium", "Medium"),
    ("high", "High"),
    ("urgent", "Urgent"),
)


class MoodPreset(NamedTuple):
    emoji: str
    name: str
    value: int
    color: str


DEFAULT_MOODS: tuple[MoodPreset, ...] = (
    MoodPreset("😄", "Excellent", 5, "#4CAF50"),
    MoodPreset("😊", "Good", 4, "#8BC34A"),
    MoodPreset("😐", "Neutral", 3, "#FFC107"),
    MoodPreset("😔", "Poor", 2, "#FF9800"),
    MoodPreset("😢", "Terrible", 1, "#F44336"),
)

CUSTOM_MOOD_COLOR = "#9C27B0"

# bcrypt only reads the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72


def expense_category_name(category_id: str) -> str:
    """Display name for an expense category id; unknown ids pass through."""
    for entry in EXPENSE_CATEGORIES:
        if entry.id == category_id:
            return entry.name
    return category_id
