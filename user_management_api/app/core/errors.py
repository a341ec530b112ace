"""
Error types and exception handlers.

The service layer does not raise for expected failures.  It returns
one of the ``ServiceError`` variants defined here (``UserNotFound``,
``EmailAlreadyExists``) and the endpoints turn them into an
``ApiError``.  ``register_exception_handlers`` installs handlers that
render every failure with the same body::

    {"status": <code>, "errors": ["<message>", ...]}

Internal error details are never sent to clients; unexpected
exceptions are logged with their traceback and answered with a
generic 500.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceError(ABC):
    """Base class for failures returned by the service layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    @property
    @abstractmethod
    def message(self) -> str:
        """Client-facing description of the failure."""


@dataclass(frozen=True)
class UserNotFound(ServiceError):
    user_id: int

    status_code = status.HTTP_404_NOT_FOUND

    @property
    def message(self) -> str:
        return f"User with id {self.user_id} not found."


@dataclass(frozen=True)
class EmailAlreadyExists(ServiceError):
    email: str

    status_code = status.HTTP_400_BAD_REQUEST

    @property
    def message(self) -> str:
        return (
            f"The email provided ({self.email}) is already registered. "
            "Please use a different email."
        )


class ApiError(Exception):
    """An error that should be returned to the client as-is."""

    def __init__(self, status_code: int, errors: Sequence[str]) -> None:
        super().__init__("; ".join(errors))
        self.status_code = status_code
        self.errors = list(errors)

    @classmethod
    def from_service_error(cls, error: ServiceError) -> "ApiError":
        return cls(error.status_code, [error.message])


def error_body(status_code: int, errors: List[str]) -> Dict[str, Any]:
    return {"status": status_code, "errors": errors}


def _field_message(error: Dict[str, Any]) -> str:
    """Format a single pydantic error as ``"<field>: <message>"``.

    The leading location segment (``body``, ``path``, ``query``) is
    dropped.  Errors about the body as a whole (e.g. invalid JSON) have
    no field and are returned as the bare message.
    """
    message = error.get("msg", "Invalid value")
    # The loc of a JSON decode error holds a character offset, not a field.
    if error.get("type") == "json_invalid":
        return message
    loc = [str(part) for part in error.get("loc", ())]
    if loc and loc[0] in {"body", "path", "query", "header", "cookie"}:
        loc = loc[1:]
    if not loc:
        return message
    return f"{'.'.join(loc)}: {message}"


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(error_body(exc.status_code, exc.errors), status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # One message per field; pydantic reports at most one error per field
    # for these schemas, but duplicates are dropped to be sure.
    messages: List[str] = []
    for error in exc.errors():
        message = _field_message(error)
        if message not in messages:
            messages.append(message)
    logger.info("Validation failed for %s %s: %s", request.method, request.url.path, messages)
    code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(error_body(code, messages), status_code=code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = str(exc.detail) if exc.detail else "An error occurred"
    return JSONResponse(
        error_body(exc.status_code, [message]),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unexpected exceptions."""
    logger.error(
        "Unhandled exception on %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(error_body(code, ["Internal server error"]), status_code=code)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
