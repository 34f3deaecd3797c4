"""Route Dependencies - bearer-token auth and owner-scoped lookups.

Invariants:
    - No Authorization header (or a non-Bearer scheme) -> 401 AuthenticationRequiredError
    - A bad, tampered or expired token -> 403 TokenRejectedError
    - get_owned_or_404 filters on id AND user_id: another user's record is
      indistinguishable from a missing one
"""

from typing import TypeVar
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zenstudent.config import Settings, get_settings
from zenstudent.core.domain_types import UserId
from zenstudent.core.errors import AuthenticationRequiredError, ResourceNotFoundError
from zenstudent.infrastructure.security import decode_token

ModelT = TypeVar("ModelT")

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> UserId:
    """Resolve the caller's user id from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequiredError()
    return decode_token(credentials.credentials, settings)


async def get_owned_or_404(
    db: AsyncSession, model: type[ModelT], record_id: UUID, user_id: UserId,
) -> ModelT:
    """Load one of the caller's records or raise ResourceNotFoundError."""
    result = await db.execute(
        select(model).where(model.id == record_id, model.user_id == user_id),
    )
    record = result.scalar_one_or_none()
    if record is None:
        raise ResourceNotFoundError(model.__name__, str(record_id))
    return record
