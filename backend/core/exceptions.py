"""
Domain error taxonomy and the handlers that turn it into API responses.

Services raise the exceptions defined here and never deal with HTTP status
codes themselves. The handlers registered by ``register_exception_handlers``
are the only place where a domain outcome is mapped to a transport status.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base error raised by services"""

    error_code = "ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed or missing input, or a reference that does not resolve"""

    error_code = "VALIDATION_ERROR"


class NotFoundError(DomainError):
    """Resource not found error"""

    error_code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            message=f"{resource} with id {identifier} not found",
            details={"resource": resource, "identifier": str(identifier)},
        )


class ConflictError(DomainError):
    """The request is valid but clashes with the current state"""

    error_code = "CONFLICT"


class InternalError(DomainError):
    """Store failure; the message is safe to show to callers"""

    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal error while accessing the store"):
        super().__init__(message=message)


_STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: DomainError) -> int:
    for error_class, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Convert a domain error to a consistent API response"""
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.__class__.__name__} at {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.__class__.__name__} at {request.url.path}: {exc.message}")

    content = {
        "detail": exc.message,
        "error_code": exc.error_code,
        "path": str(request.url.path),
    }
    if exc.details and status_code < 500:
        content["details"] = exc.details
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app"""
    app.add_exception_handler(DomainError, handle_domain_error)
