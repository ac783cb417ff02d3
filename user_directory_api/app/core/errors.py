"""
Error types and exception handlers.

Handlers translate exceptions raised while serving a request into a
consistent JSON body::

    {
        "timestamp": "2024-01-01T12:00:00.000000",
        "status": 400,
        "error": "Validation Failed",
        "message": "Invalid input data",
        "validationErrors": {"email": "must be a well-formed email address"},
        "path": "/users"
    }

``validationErrors`` is only present for validation failures.
"Not found" is not an exception in this service; endpoints answer it
with an empty 404 directly.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class UserValidationError(Exception):
    """Raised when a user payload fails field checks.

    ``errors`` maps each offending field (by its JSON name) to a
    human‑readable message.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__("Invalid input data")
        self.errors = errors


def error_body(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    validation_errors: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
        "status": status_code,
        "error": error,
        "message": message,
    }
    if validation_errors is not None:
        body["validationErrors"] = validation_errors
    body["path"] = request.url.path
    return body


def _request_validation_errors(exc: RequestValidationError) -> Dict[str, str]:
    """Flatten FastAPI's error list into ``{field: message}``.

    The field is the last element of the error location, e.g.
    ``user_id`` for a bad path parameter or ``name`` for a missing
    query parameter.  A body that is not valid JSON is reported under
    ``body`` (its location ends in a character offset, not a name).
    """
    errors: Dict[str, str] = {}
    for err in exc.errors():
        names = [part for part in err.get("loc", ()) if isinstance(part, str)]
        field = names[-1] if names else "body"
        errors.setdefault(field, err.get("msg", "Invalid value"))
    return errors


async def user_validation_handler(request: Request, exc: UserValidationError) -> JSONResponse:
    logger.info("Rejected payload for %s: %s", request.url.path, exc.errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Validation Failed",
            "Invalid input data",
            exc.errors,
        ),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _request_validation_errors(exc)
    logger.info("Rejected request for %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Validation Failed",
            "Invalid input data",
            errors,
        ),
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(request, status.HTTP_400_BAD_REQUEST, "Bad Request", str(exc)),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "An unexpected error occurred",
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all error handlers to ``app``."""
    app.add_exception_handler(UserValidationError, user_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
