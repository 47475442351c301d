"""Tests for the exception hierarchy."""

import pytest

from neo_docstore.core.exceptions import (
    ApiError,
    BadRequestError,
    CreationError,
    CreationFailedError,
    DocstoreError,
    EntityDeletedError,
    EntityNotFoundError,
    InvalidCursorError,
    InvalidFilterValueError,
    PaginationError,
    QueryExecutionError,
    RepositoryError,
    ValidationError,
    create_error_response,
)


class TestExceptionHierarchy:

    @pytest.mark.parametrize("error,base", [
        (InvalidFilterValueError("bad"), ValidationError),
        (InvalidCursorError("abc"), ValidationError),
        (EntityNotFoundError("Contact", "1"), RepositoryError),
        (CreationError("boom"), RepositoryError),
        (PaginationError("boom"), QueryExecutionError),
        (CreationFailedError("Creation failed"), BadRequestError),
        (BadRequestError("bad"), ApiError),
    ])
    def test_kinds(self, error, base):
        assert isinstance(error, base)
        assert isinstance(error, DocstoreError)

    def test_default_error_code(self):
        error = EntityDeletedError("Contact", "42")

        assert error.error_code == "EntityDeletedError"
        assert error.message == "Contact with ID 42 has been deleted"
        assert error.details == {"entity_type": "Contact", "identifier": "42"}

    def test_filter_message_prefix(self):
        error = InvalidFilterValueError("status cannot have null or undefined value", key="status")

        assert str(error) == "Invalid filter value: status cannot have null or undefined value"
        assert error.key == "status"

    def test_cursor_reason(self):
        assert str(InvalidCursorError("abc", "malformed token")) == "Invalid cursor: malformed token"
        assert str(InvalidCursorError("abc")) == "Invalid cursor"


class TestErrorResponse:

    def test_payload_shape(self):
        error = DocstoreError("Something failed", error_code="CUSTOM", details={"a": 1})

        assert create_error_response(error) == {
            "error": {
                "code": "CUSTOM",
                "message": "Something failed",
                "details": {"a": 1},
                "type": "DocstoreError",
            }
        }
