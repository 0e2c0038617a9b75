"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from ..services.storage import ResourceStore


def get_store(request: Request) -> ResourceStore:
    """Return the store created for this application in ``create_app``."""
    return request.app.state.store
