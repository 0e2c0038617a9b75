"""
Search endpoint.

``GET /search/{resource}?q=term`` filters one resource kind by a
case-insensitive substring match.  The resource segment is checked
against ``ResourceKind``; anything else is a 400.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...core.resources import ResourceKind
from ...schemas.common import SearchResults
from ...services.storage import ResourceStore
from ..dependencies import get_store

router = APIRouter()


@router.get("/{resource}", response_model=SearchResults)
async def search_resources(
    resource: str,
    q: str = Query("", description="Search term; empty matches everything"),
    store: ResourceStore = Depends(get_store),
) -> SearchResults:
    try:
        kind = ResourceKind(resource)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid resource type")
    return [record.model_dump(mode="json", by_alias=True) for record in store.search(kind, q)]
