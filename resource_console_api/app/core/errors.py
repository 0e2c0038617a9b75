"""
Error handlers shared by every route.

Three kinds of failure reach the client:

* validation errors: 400 with ``{"message": "Validation error",
  "errors": [...]}``, one entry per offending field;
* HTTP errors raised by handlers (404, 409, 400): ``{"message": detail}``;
* anything else: 500 with a generic message.  The traceback is logged
  on the server only.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

# Leading ``loc`` entries FastAPI adds to say where a value came from.
_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Reduce Pydantic error dicts to ``path``/``message``/``code``."""
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _LOCATIONS:
            loc = loc[1:]
        formatted.append({"path": loc, "message": error.get("msg", ""), "code": error.get("type", "")})
    return formatted


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation error", "errors": format_validation_errors(exc.errors())},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def catch_unexpected_errors(request: Request, call_next):
    """Turn an unhandled exception into an opaque 500 response."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": UNEXPECTED_ERROR_MESSAGE},
        )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(catch_unexpected_errors)
