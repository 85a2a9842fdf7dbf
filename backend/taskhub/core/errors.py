"""Error Hierarchy — typed, categorized exceptions for all TaskHub failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are raised before any mutation
    - Ownership mismatches raise NotFoundError with the same message as a missing row
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with TaskHubError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INVALID_REQUEST = "invalid_request"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_type: str | None = None
    identifier: str | None = None
    user_identifier: str | None = None
    debug_info: dict[str, Any] | None = None


class TaskHubError(Exception):
    """Base exception for all TaskHub errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity_type": self.context.entity_type,
                    "identifier": self.context.identifier,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(TaskHubError):
    """One or more field rules failed on save. Carries every violation."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(
            "; ".join(errors), "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.errors = list(errors)

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.errors
        return response


class InvalidRequestError(TaskHubError):
    """Caller asked for something the API never returns (e.g. the raw entity)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_REQUEST", ErrorCategory.INVALID_REQUEST,
            ErrorSeverity.ERROR, context, 400,
        )


class NotFoundError(TaskHubError):
    """Requested resource does not exist (or is not visible in the current scope)."""
    def __init__(
        self, resource_type: str, identifier: str | None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_type = resource_type
        ctx.identifier = identifier
        super().__init__(
            f"{resource_type} '{identifier}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.identifier = identifier


# ─── Infrastructure Errors (500-level) ──────────────────────────

class ArgumentError(TaskHubError):
    """A required collaborator was not supplied."""
    def __init__(self, argument: str, context: ErrorContext | None = None):
        super().__init__(
            f"Argument '{argument}' must not be None",
            "INVALID_ARGUMENT", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.argument = argument


class DatabaseError(TaskHubError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
