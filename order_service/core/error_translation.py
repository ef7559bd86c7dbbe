"""Error Translation — the single policy mapping raised failures to the external error contract.

Invariants:
    - Stateless: the same exception always produces the same status/message/errors
    - errors is populated ONLY for structural validation failures
    - Unclassified failures (anything outside the known taxonomy, including
      DatabaseError) become 500 with a generic message; detail is logged, never returned
    - No other component constructs an ErrorResponse

Design Decisions:
    - Ordered rule tuple over isinstance chain: the policy table is data, read-only
    - Lives in core/ (no FastAPI import): api/error_handlers.py adapts framework
      exceptions into the taxonomy, then calls translate_error
"""

import logging
from datetime import datetime, timezone

from pydantic import Field

from order_service.core.contracts import ContractModel
from order_service.core.errors import (
    OrderServiceError,
    StructuralValidationError,
    BusinessRuleViolation,
    ResourceNotFoundError,
    ConcurrencyError,
    RequestRejectedError,
)

logger = logging.getLogger(__name__)

UNCLASSIFIED_STATUS = 500
UNCLASSIFIED_MESSAGE = "An unexpected error occurred"

# Failure kinds whose own message is safe to return. First match wins.
_EXPOSED_FAILURES: tuple[type[OrderServiceError], ...] = (
    StructuralValidationError,
    BusinessRuleViolation,
    ResourceNotFoundError,
    ConcurrencyError,
    RequestRejectedError,
)


class ErrorResponse(ContractModel):
    """Error contract — the only external shape of a failure."""
    status: int
    message: str
    timestamp: datetime
    errors: dict[str, str] = Field(default_factory=dict)


def translate_error(exc: BaseException) -> ErrorResponse:
    """Map any raised failure to the uniform error contract."""
    if isinstance(exc, _EXPOSED_FAILURES):
        return ErrorResponse(
            status=exc.http_status,
            message=exc.message,
            timestamp=exc.context.timestamp,
            errors=_field_errors(exc),
        )
    logger.error(
        f"Unclassified failure: {type(exc).__name__}: {exc}",
        exc_info=exc,
        extra={"error_code": getattr(exc, "code", "INTERNAL_ERROR")},
    )
    return ErrorResponse(
        status=UNCLASSIFIED_STATUS,
        message=UNCLASSIFIED_MESSAGE,
        timestamp=datetime.now(timezone.utc),
    )


def _field_errors(exc: OrderServiceError) -> dict[str, str]:
    if isinstance(exc, StructuralValidationError):
        return dict(exc.field_errors)
    return {}
