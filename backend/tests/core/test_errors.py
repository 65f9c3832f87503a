"""Error Hierarchy - codes, HTTP statuses and the REST envelope."""

from app.core.errors import (
    RegistryError, ErrorCategory, EmptyFieldError, InvalidFieldError,
    DuplicateEntityError, UnknownCustomerError, UnknownDriverError,
    UnknownReceiverError, OperatorRequiredError, DatabaseError,
)


def test_codes_and_statuses():
    cases = [
        (EmptyFieldError("customer", "name"), "EMPTY_FIELD", 400),
        (InvalidFieldError("shipment", "weight", "negative"), "INVALID_FIELD", 400),
        (DuplicateEntityError("driver", "Alice"), "DUPLICATE_ENTITY", 409),
        (UnknownCustomerError("Carol"), "UNKNOWN_CUSTOMER", 422),
        (UnknownDriverError("Ghost"), "UNKNOWN_DRIVER", 422),
        (UnknownReceiverError("Frank", 1), "UNKNOWN_RECEIVER", 422),
        (OperatorRequiredError(), "OPERATOR_REQUIRED", 403),
        (DatabaseError("boom", "commit"), "DATABASE_ERROR", 503),
    ]
    for error, code, status in cases:
        assert isinstance(error, RegistryError)
        assert error.code == code
        assert error.http_status == status


def test_referential_errors_share_category():
    for error in (
        UnknownCustomerError("a"), UnknownDriverError("b"), UnknownReceiverError("c", 0),
    ):
        assert error.category is ErrorCategory.REFERENTIAL_INTEGRITY


def test_to_response_envelope():
    response = DuplicateEntityError("customer", "Bob").to_response()
    error = response["error"]
    assert error["code"] == "DUPLICATE_ENTITY"
    assert error["category"] == "conflict"
    assert error["severity"] == "error"
    assert error["context"] == {
        "entity_kind": "customer", "entity_name": "Bob", "field": None,
    }
    assert "Bob" in error["message"]


def test_unknown_receiver_carries_position():
    error = UnknownReceiverError("Frank", 2)
    assert error.position == 2
    assert error.context.field == "receivers"
    assert error.context.debug_info == {"position": 2}
