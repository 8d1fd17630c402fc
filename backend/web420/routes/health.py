"""
WEB 420 API: Health Check Route
===============================

What:  GET /health for container and load balancer probes.
How:   Executes SELECT 1 against the database and reports uptime.

Status levels:
    healthy:   database reachable
    unhealthy: database unreachable (still HTTP 200; the body carries the status)
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from web420 import __version__
from web420.database import engine
from web420.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
