"""Error Hierarchy — status codes and envelopes for every caller-facing error.

Tests:
    - Each DomainError carries its HTTP status and a flat {"error": message} body
    - DatabaseError is not a DomainError (it must reach the error normalizer)
"""

from blog_api.core.errors import (
    BlogApiError, DatabaseError, DomainError, ErrorCategory,
    IdMismatchError, RequestValidationFailed, ResourceNotFoundError,
    UnauthorizedError,
)


def test_unauthorized_is_401_with_fixed_message():
    err = UnauthorizedError()
    assert err.http_status == 401
    assert err.to_response() == {"error": "Unauthorized"}
    assert err.category is ErrorCategory.AUTHENTICATION


def test_id_mismatch_is_400_and_keeps_both_ids():
    err = IdMismatchError(5, 6)
    assert err.http_status == 400
    assert err.to_response() == {"error": "ID mismatch"}
    assert (err.path_id, err.body_id) == (5, 6)


def test_not_found_message_names_resource_type():
    err = ResourceNotFoundError("Blog", 42)
    assert err.http_status == 404
    assert err.to_response() == {"error": "Blog not found"}
    assert err.resource_id == 42


def test_request_validation_failed_is_400():
    err = RequestValidationFailed("Invalid request data: body.name: Field required")
    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"


def test_database_error_is_not_caller_facing():
    err = DatabaseError("Connection or operational error", "execute")
    assert isinstance(err, BlogApiError)
    assert not isinstance(err, DomainError)
    assert err.http_status == 500
    assert err.operation == "execute"
