"""Error Handlers — every failure leaves the API as one `{"error": {...}}` envelope.

Invariants:
    - TaskHubError keeps its own status: 400 validation, 404 not found, 503 database, 500 argument
    - 4xx domain errors log at WARNING, 5xx at ERROR
    - Malformed request bodies (wrong JSON types, boolean status) answer 400 with per-field details
    - Anything unexpected answers a generic 500 without exception text
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskhub.core.errors import ErrorCategory, ErrorSeverity, TaskHubError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain, request-body and catch-all handlers to `app`."""
    app.add_exception_handler(TaskHubError, handle_taskhub_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)


async def handle_taskhub_error(request: Request, exc: TaskHubError):
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation(
    request: Request, exc: RequestValidationError,
):
    details = [
        {
            "field": ".".join(str(part) for part in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Malformed request body: {len(details)} field error(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def handle_unexpected(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__}",
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    code: str, message: str,
    category: ErrorCategory, severity: ErrorSeverity, **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }
