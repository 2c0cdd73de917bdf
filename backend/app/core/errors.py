"""Error Hierarchy — typed, categorized exceptions for all EventHub failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by every error response
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EventHubError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Driver exceptions never cross the store boundary — translated in infrastructure/database.py
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTEGRITY = "integrity"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    slug: str | None = None
    event_id: str | None = None
    debug_info: dict[str, Any] | None = None


class EventHubError(Exception):
    """Base exception for all EventHub errors."""

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
                    "slug": self.context.slug,
                    "event_id": self.context.event_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InputValidationError(EventHubError):
    """Request parameter or document field failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class InvalidDateError(InputValidationError):
    """Event date could not be parsed."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        super().__init__(f"Invalid date format: {value}", "date", context)
        self.code = "INVALID_DATE"
        self.value = value


class ResourceNotFoundError(EventHubError):
    """Requested resource does not exist."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        message: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message or f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ReferentialIntegrityError(EventHubError):
    """Write references a record that does not exist (e.g. Booking → Event)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} with ID {resource_id} does not exist",
            "REFERENCED_RESOURCE_MISSING", ErrorCategory.INTEGRITY,
            ErrorSeverity.ERROR, context, 422,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateKeyConflictError(EventHubError):
    """Unique index rejected the write."""
    def __init__(self, collection: str, key: str, context: ErrorContext | None = None):
        super().__init__(
            f"Duplicate value for unique key '{key}' in {collection}",
            "DUPLICATE_KEY", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.collection = collection
        self.key = key


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(EventHubError):
    """Database unreachable, authentication failed, or driver error."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
