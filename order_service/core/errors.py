"""Error Hierarchy — typed, categorized exceptions for all Order Service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - Errors never build their own response envelope; core/error_translation.py does
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with OrderServiceError base: one FastAPI handler catches all
      (ADR: uniform error shape)
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class OrderServiceError(Exception):
    """Base exception for all Order Service errors."""

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


# ─── Domain Errors (400-level) ──────────────────────────────────

class StructuralValidationError(OrderServiceError):
    """Input shape/format violated — raised at the boundary, never by engines."""
    def __init__(
        self, field_errors: dict[str, str], context: ErrorContext | None = None,
    ):
        super().__init__(
            "Validation failed", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field_errors = dict(field_errors)


class BusinessRuleViolation(OrderServiceError):
    """Operation rejected because of the current state of the data."""
    def __init__(
        self, message: str, code: str = "BUSINESS_RULE_VIOLATION",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidTransitionError(BusinessRuleViolation):
    """Requested operation is not allowed from the record's current status."""
    def __init__(
        self, resource_type: str, operation: str, current_status: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.operation = operation
        super().__init__(
            f"Cannot {operation} {resource_type.lower()} in status "
            f"{current_status.lower()}",
            "INVALID_TRANSITION", ctx,
        )
        self.operation = operation
        self.current_status = current_status


class ResourceNotFoundError(OrderServiceError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} not found with id: {resource_id}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConcurrencyError(OrderServiceError):
    """Concurrent modification detected — the caller may retry."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONCURRENCY_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class RequestRejectedError(OrderServiceError):
    """Transport rejected the request before it reached a route (unknown path, bad method)."""
    def __init__(self, message: str, http_status: int, context: ErrorContext | None = None):
        super().__init__(
            message, "REQUEST_REJECTED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, http_status,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(OrderServiceError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
