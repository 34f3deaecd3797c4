"""Security - bcrypt password hashing and JWT bearer tokens.

Invariants:
    - Password hashes are salted bcrypt; verification is constant-time (bcrypt.checkpw)
    - Token payload is exactly {"userId": <uuid str>, "exp": <unix time>}
    - decode_token raises TokenRejectedError for every failure mode
      (bad signature, expired, malformed payload)
    - bcrypt work runs in a thread pool so the event loop is never blocked
    - Passwords over 72 encoded bytes never reach bcrypt: hashing raises
      ValueError, verification is a plain mismatch

Design Decisions:
    - bcrypt and PyJWT used directly (no passlib layer)
    - Token lifetime measured in days from settings.token_expiry_days
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import bcrypt
import jwt
from fastapi.concurrency import run_in_threadpool

from zenstudent.config import Settings
from zenstudent.core.domain_types import PASSWORD_MAX_BYTES, UserId
from zenstudent.core.errors import TokenRejectedError

logger = logging.getLogger(__name__)


# ─── Passwords ───────────────────────────────────────────────────

def hash_password(password: str, rounds: int = 10) -> str:
    encoded = password.encode("utf-8")
    if len(encoded) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password cannot exceed {PASSWORD_MAX_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(encoded, salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    encoded = password.encode("utf-8")
    if len(encoded) > PASSWORD_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, hashed_password.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        logger.warning("Password check against malformed hash")
        return False


async def hash_password_async(password: str, rounds: int = 10) -> str:
    return await run_in_threadpool(hash_password, password, rounds)


async def verify_password_async(password: str, hashed_password: str) -> bool:
    return await run_in_threadpool(verify_password, password, hashed_password)


# ─── Tokens ──────────────────────────────────────────────────────

def create_access_token(
    user_id: UUID, settings: Settings, now: datetime | None = None,
) -> str:
    """Sign a bearer token for user_id that expires after the configured days."""
    issued = now or datetime.now(timezone.utc)
    payload = {
        "userId": str(user_id),
        "exp": issued + timedelta(days=settings.token_expiry_days),
    }
    return jwt.encode(
        payload, settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str, settings: Settings) -> UserId:
    """Verify signature and expiry, return the user id carried by the token."""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        raise TokenRejectedError()
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected invalid token: {e}")
        raise TokenRejectedError()

    try:
        return UserId(UUID(str(payload["userId"])))
    except (KeyError, ValueError):
        logger.info("Rejected token with malformed userId claim")
        raise TokenRejectedError()
