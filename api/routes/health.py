"""
Health Check Route

``GET /health`` tells whoever started ``comment serve`` that the fixture API
is up before comment requests are sent to it.
"""

from fastapi import APIRouter

from api.models.responses import HealthResponse


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report the fixture API name and version."""
    return HealthResponse(ok=True, service="comment-fixture-api", version="v1")
