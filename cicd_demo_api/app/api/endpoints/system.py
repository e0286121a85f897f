"""
System endpoints used by the deployment pipeline.

These routes are mounted at the root (``/health``, ``/version``,
``/metrics``) rather than under ``/api`` and return flat objects.
"""

from fastapi import APIRouter, Depends

from ...schemas.system import HealthRead, MetricsRead, VersionRead
from ...services.system_service import SystemService
from ..deps import get_system_service


router = APIRouter()


@router.get("/health", response_model=HealthRead)
async def health(service: SystemService = Depends(get_system_service)) -> HealthRead:
    return service.health()


@router.get("/version", response_model=VersionRead)
async def version(service: SystemService = Depends(get_system_service)) -> VersionRead:
    return service.version()


@router.get("/metrics", response_model=MetricsRead)
async def metrics(service: SystemService = Depends(get_system_service)) -> MetricsRead:
    return service.metrics()
