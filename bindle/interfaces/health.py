"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Returns server status and version as TOML.
"""

from fastapi import APIRouter
from starlette.responses import Response

from bindle.core.config import settings
from bindle.interfaces.reply import reply
from bindle.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])

HTTP_200 = 200


@router.get(
    "/healthz",
    summary="Health check",
    description="Returns server health status and version.",
)
def health_check() -> Response:
    """Return current server health status."""
    return reply(HealthResponse(status="ok", version=settings.version), HTTP_200)
