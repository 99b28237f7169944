"""
Liveness endpoint.
"""
from datetime import datetime, timezone

from ..schemas.base import HealthResponse


async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="ok", datetime=datetime.now(timezone.utc).isoformat())
