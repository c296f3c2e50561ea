"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: lookup_dashboard.application.services.overview_service
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from lookup_dashboard.api.deps import get_overview_service
from lookup_dashboard.application.services.overview_service import OverviewService
from lookup_dashboard.core.exceptions import StoreError
from lookup_dashboard.models.overview import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(
    overview_service: OverviewService = Depends(get_overview_service),
):
    """Database health check; reports the store's current time."""
    try:
        now = await overview_service.get_server_time()
    except StoreError as e:
        body = HealthResponse(status="unhealthy", message=e.message)
        return JSONResponse(status_code=503, content=body.model_dump(mode="json"))
    return HealthResponse(status="healthy", message="Database connection OK", now=now)
