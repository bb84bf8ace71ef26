"""
NoteKeeper Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Probes the database with `SELECT 1` and reports the number of session
       tokens held in memory.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (still HTTP 200; read `status`)
"""

import logging
import time

from fastapi import APIRouter, Depends

from notekeeper import __version__
from notekeeper.database import ping
from notekeeper.schemas.common import HealthResponse
from notekeeper.services.session_registry import SessionRegistry, get_session_registry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    registry: SessionRegistry = Depends(get_session_registry),
) -> HealthResponse:
    """Report database connectivity, active sessions and uptime."""
    connected = await ping()
    if not connected:
        logger.warning("Health check: database unreachable")

    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        active_sessions=len(registry),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
