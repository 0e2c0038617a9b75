"""
Top‑level API router.

Aggregates the per-kind CRUD routers, the search route and the info
routes.  The application mounts it under ``settings.api_prefix``.
"""

from fastapi import APIRouter

from ..core.resources import RESOURCES
from .endpoints import info, search
from .endpoints.resources import build_router

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(search.router, prefix="/search", tags=["search"])
for spec in RESOURCES.values():
    router.include_router(build_router(spec), prefix=f"/{spec.kind.value}", tags=[spec.kind.value])
