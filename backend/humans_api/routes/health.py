"""
Humans API — Health Check Route
=================================

What:  Health check endpoint for monitoring and container liveness checks.
Why:   A backend that can't reach its database is effectively down.
How:   Pings the store with SELECT 1 and reports the result.
Who:   Docker health checks, load balancers, monitoring.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from humans_api import __version__
from humans_api.dependencies import get_store
from humans_api.schemas.human import HealthResponse
from humans_api.services.human_store import HumanStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: HumanStore = Depends(get_store),
) -> HealthResponse:
    connected = await store.ping()
    if not connected:
        response.status_code = 503
        logger.warning("Health check: database unreachable")

    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
