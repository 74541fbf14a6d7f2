"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from ..config import settings
from ..schemas import HealthResponse, ServiceStatus

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    from ..main import app_state

    services: list[ServiceStatus] = []
    overall = "ok"

    scraper = app_state.get("scraper")
    if scraper:
        services.append(ServiceStatus(name="scraper", status="ok", detail=settings.search_url))
    else:
        services.append(ServiceStatus(name="scraper", status="unavailable", detail="not initialized"))
        overall = "degraded"

    return HealthResponse(status=overall, services=services)
