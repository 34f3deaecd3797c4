"""Auth Service - account registration and credential checks.

Invariants:
    - Emails are compared lower-cased (schemas normalize before we get here)
    - A duplicate email fails with DuplicateEmailError, whether caught by the
      pre-check or by the unique index on a concurrent insert
    - Unknown email and wrong password raise the same InvalidCredentialsError
    - bcrypt never runs on the event loop (security.*_async helpers)
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from zenstudent.config import Settings
from zenstudent.core.errors import DuplicateEmailError, InvalidCredentialsError
from zenstudent.infrastructure.security import (
    create_access_token, hash_password_async, verify_password_async,
)
from zenstudent.models.user import User
from zenstudent.schemas.auth import RegisterRequest

logger = logging.getLogger(__name__)


class AuthService:
    """Registration and login against the users table."""

    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.settings = settings

    async def _find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def register(self, body: RegisterRequest) -> User:
        """Create a user with a salted bcrypt hash of the password."""
        if await self._find_by_email(body.email):
            logger.info("Registration rejected: email already in use")
            raise DuplicateEmailError()

        user = User(
            full_name=body.full_name,
            email=body.email,
            password_hash=await hash_password_async(
                body.password, self.settings.bcrypt_rounds,
            ),
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            # lost a race with a concurrent registration for the same email
            await self.db.rollback()
            raise DuplicateEmailError()
        await self.db.refresh(user)
        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def authenticate(self, email: str, password: str) -> tuple[str, User]:
        """Return (token, user) or raise InvalidCredentialsError."""
        user = await self._find_by_email(email)
        if user is None:
            raise InvalidCredentialsError()
        if not await verify_password_async(password, user.password_hash):
            raise InvalidCredentialsError()

        token = create_access_token(user.id, self.settings)
        logger.info("User logged in", extra={"user_id": user.id})
        return token, user
