"""
Global exception handlers.

Every error response has the shape ``{"error": "<message>"}``.

* Domain errors (``InventoryError``) map to a status code by class:
  conflicts and bad credentials are client errors, a missing product
  is 404, a bad token is 401.  Anything not listed (``ServiceError``,
  ``TokenSigningError``) is a 500 without internal details.
* ``RequestValidationError`` (missing or malformed fields) is a 400.
* ``HTTPException`` keeps its status and headers.
* Any other exception is a 500.
"""

import logging
from typing import Dict, Tuple, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import (
    InventoryError,
    ProductExistsError,
    ProductNotFoundError,
    TokenInvalidError,
    UserExistsError,
    UserInvalidError,
)
from ..schemas import ErrorRead

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"

# Class -> (status code, public message; empty means str(exc)).
_DOMAIN_ERRORS: Dict[Type[InventoryError], Tuple[int, str]] = {
    UserExistsError: (status.HTTP_400_BAD_REQUEST, "user already exist"),
    UserInvalidError: (status.HTTP_400_BAD_REQUEST, "user invalid"),
    ProductExistsError: (status.HTTP_400_BAD_REQUEST, ""),
    ProductNotFoundError: (status.HTTP_404_NOT_FOUND, ""),
    TokenInvalidError: (status.HTTP_401_UNAUTHORIZED, "invalid token"),
}


def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorRead(error=message).model_dump(),
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        mapped = _DOMAIN_ERRORS.get(type(exc))
        if mapped is None:
            logger.error("Internal error on %s: %s", request.url.path, exc, exc_info=exc)
            return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
        status_code, message = mapped
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
        headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
        return _error_response(status_code, message or str(exc), headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        logger.warning("Validation error on %s: %s", request.url.path, details)
        return _error_response(status.HTTP_400_BAD_REQUEST, f"parse request: {details}")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch‑all; never leaks internal details."""
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
