"""
Application package initializer.

The service is organised into a handful of layers: ``core`` holds
configuration, logging, error handlers and the resource catalogue,
``schemas`` the Pydantic payload models, ``services`` the in‑memory
store and ``api`` the routers.  Every resource kind shares the same
CRUD surface, so routers are generated from the catalogue instead of
being written out once per kind.

The ASGI application itself lives in ``main`` and is not imported
here, so the client can use the catalogue without building an app.
"""
