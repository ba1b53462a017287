"""
Health check REST API routes
"""
import time

from fastapi import APIRouter, Depends

from sandbox_gateway.infrastructure.config.settings import Settings, get_settings
from sandbox_gateway.interfaces.rest.schemas.response import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])

_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Liveness of the gateway itself; the Piston backend is not probed"""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime=time.time() - _start_time,
    )
