"""Auth Schemas - registration and login payloads.

Invariants:
    - RegisterRequest: fullName 2-120 chars (stripped), valid email, password 6-128 chars
      and at most 72 bytes once UTF-8 encoded
    - Emails are normalized (stripped, lower-cased) before any lookup
    - LoginRequest.email is a plain string: a malformed email must fail as 401,
      exactly like an unknown one
"""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from zenstudent.core.domain_types import PASSWORD_MAX_BYTES
from zenstudent.schemas.base import CamelModel


def _normalize_email(v: str) -> str:
    return v.strip().lower()


class RegisterRequest(CamelModel):
    full_name: str = Field(min_length=2, max_length=120)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)

    @field_validator("full_name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v) if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"password cannot exceed {PASSWORD_MAX_BYTES} bytes")
        return v


class LoginRequest(CamelModel):
    email: str = Field(max_length=255)
    password: str = Field(max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class AuthUser(CamelModel):
    id: UUID
    full_name: str
    email: str
    join_date: datetime


class LoginResponse(CamelModel):
    token: str
    user: AuthUser
