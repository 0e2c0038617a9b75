"""
Main entrypoint for the Resource Console API.

This module assembles the FastAPI application, sets up logging,
creates the record store and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn resource_console_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .services.seed import seed_store
from .services.storage import ResourceStore


def create_app(store: Optional[ResourceStore] = None, *, seed: Optional[bool] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ResourceStore]
        Store to serve.  A new empty one is created when omitted.
    seed : Optional[bool]
        Whether to load the sample records.  Defaults to
        ``settings.seed_data``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # The store lives for the lifetime of the process; routes reach it
    # through the ``get_store`` dependency.
    app.state.store = store if store is not None else ResourceStore()
    if settings.seed_data if seed is None else seed:
        seed_store(app.state.store)

    register_error_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
