"""Domain errors and their translation to HTTP responses."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: str | None = None,
        *,
        detail: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.detail = detail
        self.headers = headers

    @property
    def error(self) -> str:
        return type(self).__name__


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request payload"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Incorrect username or password"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("headers", {"WWW-Authenticate": "Bearer"})
        super().__init__(message, **kwargs)


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("headers", {"WWW-Authenticate": "Bearer"})
        super().__init__(message, **kwargs)


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"


def error_body(status_code: int, error: str, message: str, detail: Any = None) -> dict[str, Any]:
    return {"error": error, "message": message, "code": status_code, "detail": detail}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.error, exc.message, exc.detail),
        headers=exc.headers,
    )


# status codes raised by the framework itself, e.g. unknown routes
HTTP_ERROR_NAMES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: ValidationError.__name__,
    status.HTTP_401_UNAUTHORIZED: Unauthorized.__name__,
    status.HTTP_404_NOT_FOUND: NotFound.__name__,
    status.HTTP_405_METHOD_NOT_ALLOWED: "MethodNotAllowed",
    status.HTTP_409_CONFLICT: ConflictError.__name__,
    status.HTTP_500_INTERNAL_SERVER_ERROR: InternalError.__name__,
}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error = HTTP_ERROR_NAMES.get(exc.status_code, "HTTPError")
    message = exc.detail if isinstance(exc.detail, str) and exc.detail else error
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, error, message),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            # drop the leading "body"/"query"/"path" location segment
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(
        status_code=code,
        content=error_body(code, ValidationError.__name__, ValidationError.default_message, {"errors": errors}),
    )


async def internal_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=code,
        content=error_body(code, InternalError.__name__, InternalError.default_message),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the shared exception handlers to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, internal_exception_handler)
