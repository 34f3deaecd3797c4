"""Auth Routes - registration and login (the only unauthenticated /api routes).

Invariants:
    - POST /register -> 201 {"message"} or 400 (duplicate email / invalid body)
    - POST /login -> 200 {"token", "user"} or 401 with one body for every mismatch
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from zenstudent.config import Settings, get_settings
from zenstudent.infrastructure.database import get_db
from zenstudent.schemas.auth import (
    AuthUser, LoginRequest, LoginResponse, RegisterRequest,
)
from zenstudent.schemas.base import MessageResponse
from zenstudent.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    await AuthService(db, settings).register(body)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Exchange email + password for a bearer token."""
    token, user = await AuthService(db, settings).authenticate(
        body.email, body.password,
    )
    return LoginResponse(token=token, user=AuthUser.model_validate(user))
