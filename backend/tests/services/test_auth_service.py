"""AuthService - registration and authentication against the users table.

Invariants:
    - A registration that loses the race to the unique index still maps to
      DuplicateEmailError (not a 500)
    - authenticate raises the same error for unknown email and wrong password
"""

from unittest.mock import AsyncMock

import pytest

from zenstudent.core.errors import DuplicateEmailError, InvalidCredentialsError
from zenstudent.infrastructure.security import decode_token
from zenstudent.schemas.auth import RegisterRequest
from zenstudent.services.auth_service import AuthService

BODY = RegisterRequest(full_name="Ada", email="ada@example.com", password="secret123")


async def test_register_then_authenticate(test_db, settings):
    service = AuthService(test_db, settings)
    user = await service.register(BODY)
    token, found = await service.authenticate("ada@example.com", "secret123")
    assert found.id == user.id
    assert decode_token(token, settings) == user.id


async def test_register_duplicate_detected_by_precheck(test_db, settings):
    service = AuthService(test_db, settings)
    await service.register(BODY)
    with pytest.raises(DuplicateEmailError):
        await service.register(BODY)


async def test_register_race_on_unique_index_maps_to_duplicate(test_db, settings):
    service = AuthService(test_db, settings)
    await service.register(BODY)
    service._find_by_email = AsyncMock(return_value=None)
    with pytest.raises(DuplicateEmailError):
        await service.register(BODY)


@pytest.mark.parametrize("email, password", [
    ("ada@example.com", "wrong-password"),
    ("nobody@example.com", "secret123"),
])
async def test_authenticate_mismatch_raises_same_error(test_db, settings, email, password):
    service = AuthService(test_db, settings)
    await service.register(BODY)
    with pytest.raises(InvalidCredentialsError) as exc:
        await service.authenticate(email, password)
    assert exc.value.message == "Invalid email or password"
    assert exc.value.http_status == 401
