"""
Health checks for the component catalog service.
"""
from datetime import datetime, timezone
import time

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from jokoui_mcp.api.v1.components import get_component_service
from jokoui_mcp.config import settings
from jokoui_mcp.services.container import ComponentService

router = APIRouter()

# Track service start time
SERVICE_START_TIME = time.time()


class LivenessResponse(BaseModel):
    """Liveness probe response"""
    status: str
    timestamp: str


class ReadinessResponse(BaseModel):
    """Readiness probe response"""
    status: str  # "ready", "degraded"
    ready: bool
    version: str
    catalog_size: int
    uptime_seconds: float
    timestamp: str


@router.get("/health/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    return LivenessResponse(status="alive", timestamp=datetime.now(timezone.utc).isoformat())


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness(service: ComponentService = Depends(get_component_service)) -> ReadinessResponse:
    """
    The service is always usable; an empty catalog only means every lookup
    goes through the fallback probe, so it is reported as degraded.
    """
    size = len(service.store)
    return ReadinessResponse(
        status="ready" if size else "degraded",
        ready=True,
        version=settings.app_version,
        catalog_size=size,
        uptime_seconds=round(time.time() - SERVICE_START_TIME, 2),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
