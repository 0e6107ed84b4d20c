"""
Notes API: Health Check Route
==============================

What:  GET / health endpoint for container orchestrators and load balancers.
How:   The service has no external dependencies, so a process that can
       answer the request is healthy; the response reports the server time
       and the configured environment.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from notes_api.config import settings
from notes_api.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/",
    response_model=HealthResponse,
    summary="Health endpoint",
    description="Service health check. Returns 200 whenever the process is serving requests.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        message="Service is healthy",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
    )
