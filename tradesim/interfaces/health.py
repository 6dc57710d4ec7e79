"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Does not trigger a price refresh.
"""

from fastapi import APIRouter, Request

from tradesim.interfaces.trading.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=request.app.state.settings.version)
