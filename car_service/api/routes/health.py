"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the car store is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - Readiness asks the injected store, so it covers whichever backend is configured
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from car_service.api.dependencies import get_car_store
from car_service.core.repository_protocols import CarStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "car-service",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: CarStore = Depends(get_car_store)):
    """Readiness probe: includes store connectivity."""
    if not await store.health_check():
        logger.warning("Readiness check failed: car store unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_unavailable",
            },
        )
    return {"status": "ready", "checks": {"store": "healthy"}}
