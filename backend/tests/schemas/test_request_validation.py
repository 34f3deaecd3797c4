"""Request schema validation - boundary rules enforced before any handler runs.

Invariants:
    - Goal targetValue must be > 0, currentValue >= 0
    - Registration requires fullName >= 2 chars, a valid email, password >= 6 chars
    - Emails are normalized lower-case; login accepts any string as email
    - camelCase input and output
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from zenstudent.schemas.auth import LoginRequest, RegisterRequest
from zenstudent.schemas.expense import BudgetWrite, ExpenseWrite
from zenstudent.schemas.goal import GoalWrite
from zenstudent.schemas.mood import CustomMoodCreate, MoodCreate
from zenstudent.schemas.user import ProfileUpdate


# --- Goals --------------------------------------------------------------------

def test_goal_accepts_camel_case_and_defaults():
    goal = GoalWrite.model_validate({
        "title": "Read 10 pages/day", "category": "academic",
        "targetValue": 10, "unit": "pages",
    })
    assert goal.target_value == 10
    assert goal.current_value == 0
    assert goal.completed is False
    assert goal.priority == "medium"
    assert goal.tags == []


@pytest.mark.parametrize("target", [0, -1])
def test_goal_target_must_be_positive(target):
    with pytest.raises(ValidationError):
        GoalWrite(title="Run", category="fitness", target_value=target)


def test_goal_current_value_cannot_be_negative():
    with pytest.raises(ValidationError):
        GoalWrite(title="Run", category="fitness", target_value=5, current_value=-1)


def test_goal_blank_due_date_means_no_deadline():
    goal = GoalWrite.model_validate({
        "title": "Run", "category": "fitness", "targetValue": 5, "dueDate": "",
    })
    assert goal.due_date is None


def test_goal_rejects_unknown_priority_and_blank_title():
    with pytest.raises(ValidationError):
        GoalWrite(title="Run", category="fitness", target_value=5, priority="asap")
    with pytest.raises(ValidationError):
        GoalWrite(title="   ", category="fitness", target_value=5)


# --- Auth ---------------------------------------------------------------------

def test_register_normalizes_email_and_strips_name():
    body = RegisterRequest.model_validate({
        "fullName": "  Ada Lovelace ", "email": " Ada@Example.COM ", "password": "secret1",
    })
    assert body.full_name == "Ada Lovelace"
    assert body.email == "ada@example.com"


@pytest.mark.parametrize("payload", [
    {"fullName": "A", "email": "a@example.com", "password": "secret1"},
    {"fullName": "Ada", "email": "not-an-email", "password": "secret1"},
    {"fullName": "Ada", "email": "a@example.com", "password": "12345"},
    {"fullName": "Ada", "email": "a@example.com", "password": "a" * 73},
    {"fullName": "Ada", "email": "a@example.com", "password": "\u00e9" * 37},
])
def test_register_rejects_invalid_fields(payload):
    with pytest.raises(ValidationError):
        RegisterRequest.model_validate(payload)


def test_register_accepts_password_of_exactly_72_bytes():
    body = RegisterRequest(full_name="Ada", email="a@example.com", password="\u00e9" * 36)
    assert len(body.password.encode("utf-8")) == 72


def test_login_accepts_malformed_email_string():
    body = LoginRequest(email=" NOT-AN-EMAIL ", password="x")
    assert body.email == "not-an-email"


def test_profile_update_ignores_password_field():
    body = ProfileUpdate.model_validate({"bio": "hi", "password": "hacked"})
    assert body.model_dump(exclude_unset=True) == {"bio": "hi"}


# --- Moods --------------------------------------------------------------------

@pytest.mark.parametrize("mood", [0, 6])
def test_mood_value_bounded_one_to_five(mood):
    with pytest.raises(ValidationError):
        MoodCreate(mood=mood)


def test_custom_mood_defaults_color_and_value():
    custom = CustomMoodCreate(emoji="🤯", name="Overwhelmed")
    assert custom.color == "#9C27B0"
    assert custom.value == 3


# --- Expenses & budgets -------------------------------------------------------

def test_expense_amount_positive_with_cents():
    expense = ExpenseWrite.model_validate({
        "title": "Lunch", "amount": "12.50", "category": "food",
        "date": "2026-10-19", "isRecurring": False,
    })
    assert expense.amount == Decimal("12.50")
    assert expense.date == date(2026, 10, 19)
    with pytest.raises(ValidationError):
        ExpenseWrite(title="Lunch", amount=0, category="food")
    with pytest.raises(ValidationError):
        ExpenseWrite(title="Lunch", amount="1.001", category="food")


def test_budget_period_restricted():
    assert BudgetWrite(category="food", amount=100).period.value == "monthly"
    with pytest.raises(ValidationError):
        BudgetWrite(category="food", amount=100, period="daily")
