"""ZenStudent API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ZenStudentError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module's imports small
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from zenstudent.infrastructure.database import init_db, close_db
from zenstudent.infrastructure.observability import setup_logging
from zenstudent.config import API_VERSION, get_settings
from zenstudent.api.error_handlers import register_error_handlers
from zenstudent.api.routes import (
    analytics, auth, budgets, expenses, goals, health, moods, users,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.uses_placeholder_secret:
        logger.warning(
            "JWT_SECRET is not set; tokens are signed with the development placeholder",
        )
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("ZenStudent API started")
    yield
    await close_db()
    logger.info("ZenStudent API shutting down")


app = FastAPI(
    title="ZenStudent API", version=API_VERSION, lifespan=lifespan,
)

# CORS - configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes - explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(moods.router)
app.include_router(goals.router)
app.include_router(expenses.router)
app.include_router(budgets.router)
app.include_router(analytics.router)

register_error_handlers(app)


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root():
    return "ZenStudent Backend is running successfully!"


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(
        "zenstudent.main:app", host=settings.host, port=settings.port,
    )
