"""
Domain errors and the handlers that render them as ``{"message": ...}``.

Services raise these before any mutating statement runs; routers let them
propagate and the handlers registered here turn them into JSON responses.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

HISTORY_LOGS_MIGRATION_FILE = "migration_add_history_logs_table.sql"


class BarangayError(Exception):
    """Base class for errors that map to a client-visible message."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(BarangayError):
    """Missing required field, invalid enum value or length violation."""

    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(BarangayError):
    status_code = status.HTTP_401_UNAUTHORIZED


class TokenExpired(Unauthorized):
    def __init__(self):
        super().__init__("Token expired. Please log in again.")


class InvalidToken(Unauthorized):
    def __init__(self):
        super().__init__("Invalid or expired token")


class NotFound(BarangayError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(BarangayError):
    """
    Duplicate or referential conflict.

    Defaults to 409; endpoints that historically answered 400 pass it
    explicitly.
    """

    status_code = status.HTTP_409_CONFLICT


class MissingTableError(BarangayError):
    """A table the request depends on has not been migrated yet."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        migration_file: str = HISTORY_LOGS_MIGRATION_FILE,
        error: str = "Table not found",
        report_table_state: bool = False,
    ):
        super().__init__(message)
        self.migration_file = migration_file
        self.error = error
        self.report_table_state = report_table_state

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.report_table_state:
            body["tableExists"] = False
        body["error"] = self.error
        body["migrationFile"] = self.migration_file
        return body


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body."
    error = errors[0]
    field = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
    if error.get("type") == "extra_forbidden":
        return f"Unknown field: {field}."
    if error.get("type") == "missing":
        return f"{field} is required."
    if field:
        return f"Invalid value for {field}: {error.get('msg')}"
    return error.get("msg") or "Invalid request body."


def register_exception_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers on the application."""

    @app.exception_handler(BarangayError)
    async def barangay_error_handler(request: Request, exc: BarangayError) -> JSONResponse:
        log_level = logging.WARNING if exc.status_code < 500 else logging.ERROR
        logger.log(
            log_level,
            "%s %s -> %s: %s",
            request.method, request.url.path, exc.status_code, exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail) if exc.detail else "An error occurred"},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s %s: %s: %s",
            request.method, request.url.path, type(exc).__name__, exc,
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )
