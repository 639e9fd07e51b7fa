"""
Users API Backend — Info & Health Check Routes
================================================

What:  GET / (service banner) and GET /health (liveness probe).
Who:   GET / is for humans poking at the service; GET /health is called by
       Docker/Kubernetes probes and load balancers.

The service has no external dependencies, so it is healthy whenever it can
answer at all. Both payloads are static apart from the health timestamp.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from app import __version__
from app.config import settings
from app.schemas.user import HealthResponse, InfoResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get(
    "/",
    response_model=InfoResponse,
    summary="Service information",
)
async def info() -> InfoResponse:
    return InfoResponse(
        message=settings.app_message,
        version=__version__,
        status="running",
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Liveness probe. Returns 200 with the current server time.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=utc_timestamp())
