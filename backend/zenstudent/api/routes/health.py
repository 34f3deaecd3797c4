"""Health Routes - unauthenticated liveness and readiness for the ZenStudent API.

Invariants:
    - GET /api/health answers 200 with service name and version while the
      process is up; it never touches the database
    - GET /api/health/ready answers 503 until the lifespan has initialized
      the database and a SELECT 1 succeeds
    - db_manager is read at call time so a re-initialized manager is seen
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import zenstudent.infrastructure.database as database
from zenstudent.config import API_VERSION, SERVICE_NAME

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": SERVICE_NAME, "version": API_VERSION}


@router.get("/ready")
async def readiness_check():
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
