"""
Service information endpoints.

``/health`` is a liveness probe.  ``/resources`` returns the resource
catalogue (kind, label and icon) the console uses to build its
navigation.
"""

from typing import List

from fastapi import APIRouter

from ...core.config import settings
from ...core.resources import RESOURCES
from ...schemas.common import Health, ResourceInfo

router = APIRouter()


@router.get("/health", response_model=Health)
async def health_check() -> Health:
    return Health(status="healthy", version=settings.api_version)


@router.get("/resources", response_model=List[ResourceInfo])
async def list_resource_kinds() -> List[ResourceInfo]:
    """Return one entry per resource kind, in navigation order."""
    return [
        ResourceInfo(type=spec.kind.value, label=spec.label, icon=spec.icon)
        for spec in RESOURCES.values()
    ]
