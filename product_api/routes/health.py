"""
Product Management API — Health Check Route
=============================================

What:  Liveness/readiness probe for load balancers and container health checks.
How:   Pings MongoDB through the shared client; reports "unhealthy" with
       HTTP 200 so the body is always readable by the probe.
"""

import logging
import time

from fastapi import APIRouter, Request

from product_api import __version__
from product_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await request.app.state.mongo_client.admin.command("ping")
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
