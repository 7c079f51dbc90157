"""
Portfolio Backend — Health Check Route
========================================

What:  Health check endpoint for monitoring and container probes.
Why:   A failed database connection at startup does not stop the process;
       the service keeps running in a degraded state where every query fails.
       This endpoint makes that state visible without guessing from 500s.
How:   Runs SELECT 1 through the store and reports the outcome.

Status levels:
    - healthy:   Store reachable
    - unhealthy: Store unreachable (still HTTP 200: the process itself is up)
"""

import logging
import time

from fastapi import APIRouter, Depends

from portfolio_api import __version__
from portfolio_api.dependencies import get_store
from portfolio_api.schemas.portfolio import HealthResponse
from portfolio_api.store import PortfolioStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: PortfolioStore = Depends(get_store)) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await store.ping()
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
