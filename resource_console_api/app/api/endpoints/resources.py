"""
CRUD endpoints for a single resource kind.

``build_router`` generates list, get, create, update and delete routes
from a ``ResourceSpec``.  Request bodies are validated against the
kind's ``Create``/``Update`` schemas before the handler runs; a
missing record is reported as 404 with a ``"<Kind> not found"``
message.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ...core.resources import ResourceSpec
from ...schemas.common import Message, ValidationErrorBody
from ...services.storage import DuplicateUsernameError, ResourceStore
from ..dependencies import get_store


def parse_record_id(raw: str) -> Optional[int]:
    """Return the path id as an int, or ``None`` when it is not a plain number.

    A non-numeric id cannot name a record, so callers answer it with the
    same 404 as a missing one.
    """
    if not (raw.isascii() and raw.isdecimal()):
        return None
    return int(raw)


def build_router(spec: ResourceSpec) -> APIRouter:
    """Create the router for one resource kind.

    The routes use empty or ``/{record_id}`` paths; the caller mounts
    the router under ``/<kind>``.
    """
    router = APIRouter(
        responses={
            status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorBody},
            status.HTTP_404_NOT_FOUND: {"model": Message},
        }
    )
    kind = spec.kind
    create_schema = spec.create_schema
    update_schema = spec.update_schema
    read_schema = spec.read_schema
    not_found = f"{spec.singular} not found"

    @router.get("", response_model=List[read_schema], name=f"list_{kind.value}")
    async def list_records(store: ResourceStore = Depends(get_store)):
        return store.list(kind)

    @router.get("/{record_id}", response_model=read_schema, name=f"get_{kind.value}")
    async def get_record(record_id: str, store: ResourceStore = Depends(get_store)):
        parsed_id = parse_record_id(record_id)
        record = store.get(kind, parsed_id) if parsed_id is not None else None
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return record

    @router.post(
        "",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{kind.value}",
    )
    async def create_record(payload: create_schema, store: ResourceStore = Depends(get_store)):
        try:
            return store.create(kind, payload)
        except DuplicateUsernameError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    @router.put("/{record_id}", response_model=read_schema, name=f"update_{kind.value}")
    async def update_record(
        record_id: str,
        payload: update_schema,
        store: ResourceStore = Depends(get_store),
    ):
        parsed_id = parse_record_id(record_id)
        if parsed_id is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        try:
            record = store.update(kind, parsed_id, payload.model_dump(exclude_unset=True))
        except DuplicateUsernameError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return record

    @router.delete("/{record_id}", response_model=Message, name=f"delete_{kind.value}")
    async def delete_record(record_id: str, store: ResourceStore = Depends(get_store)):
        parsed_id = parse_record_id(record_id)
        if parsed_id is None or not store.delete(kind, parsed_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return {"message": f"{spec.singular} deleted successfully"}

    return router
