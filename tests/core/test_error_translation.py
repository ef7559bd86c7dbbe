"""Error translation tests — the failure → error contract policy table.

Tests cover:
    - Structural validation → 400, "Validation failed", field map populated
    - Business rule violation → 400, message only
    - Not found → 404, message names kind and id
    - Concurrency conflict → 409
    - Database and unknown failures → 500 generic message, no internal detail
"""

import logging

from order_service.core.error_translation import (
    UNCLASSIFIED_MESSAGE, ErrorResponse, translate_error,
)
from order_service.core.errors import (
    BusinessRuleViolation,
    ConcurrencyError,
    DatabaseError,
    InvalidTransitionError,
    RequestRejectedError,
    ResourceNotFoundError,
    StructuralValidationError,
)


def test_structural_validation_populates_field_errors():
    result = translate_error(
        StructuralValidationError({"email": "String should match pattern"}),
    )
    assert result.status == 400
    assert result.message == "Validation failed"
    assert result.errors == {"email": "String should match pattern"}


def test_business_rule_violation_has_no_field_errors():
    result = translate_error(BusinessRuleViolation("Order 3 already has an open invoice"))
    assert result.status == 400
    assert result.message == "Order 3 already has an open invoice"
    assert result.errors == {}


def test_invalid_transition_message_names_current_status():
    result = translate_error(InvalidTransitionError("Order", "cancel", "SHIPPED"))
    assert result.status == 400
    assert result.message == "Cannot cancel order in status shipped"


def test_not_found_names_kind_and_identifier():
    result = translate_error(ResourceNotFoundError("Order", 42))
    assert result.status == 404
    assert result.message == "Order not found with id: 42"
    assert result.errors == {}


def test_concurrency_conflict_is_409():
    result = translate_error(ConcurrencyError("Order 1 was modified concurrently"))
    assert result.status == 409


def test_request_rejected_keeps_transport_status():
    result = translate_error(RequestRejectedError("Method Not Allowed", 405))
    assert result.status == 405
    assert result.message == "Method Not Allowed"


def test_unknown_failure_is_generic_500(caplog):
    with caplog.at_level(logging.ERROR):
        result = translate_error(RuntimeError("connection to 10.0.0.5 refused"))
    assert result.status == 500
    assert result.message == UNCLASSIFIED_MESSAGE
    assert "10.0.0.5" not in result.model_dump_json()
    assert "connection to 10.0.0.5 refused" in caplog.text


def test_database_error_does_not_leak_storage_detail():
    result = translate_error(DatabaseError("relation orders does not exist", "query"))
    assert result.status == 500
    assert result.message == UNCLASSIFIED_MESSAGE
    assert result.errors == {}


def test_timestamp_comes_from_error_context():
    exc = ResourceNotFoundError("Invoice", 7)
    assert translate_error(exc).timestamp == exc.context.timestamp


def test_error_json_shape():
    body = translate_error(ResourceNotFoundError("Order", 1)).model_dump(
        mode="json", by_alias=True,
    )
    assert set(body) == {"status", "message", "timestamp", "errors"}
    assert body["errors"] == {}


def test_translation_is_deterministic():
    exc = BusinessRuleViolation("nope")
    assert translate_error(exc) == translate_error(exc)
    assert isinstance(translate_error(exc), ErrorResponse)
