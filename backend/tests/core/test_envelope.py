"""Response Envelope — status mapping and body shapes.

Tests cover:
    - Every FailureKind maps to exactly one documented status
    - Success envelopes wrap data; 204 has no body
    - details omitted when absent, kept when present
    - Routing HTTP errors reuse the error shape with a fixed message
"""

import pytest

from wordbank.core.envelope import (
    created, from_failure, from_http_status, no_content, ok, status_for,
)
from wordbank.core.errors import (
    INTERNAL_FAILURE, Failure, FailureKind, conflict, forbidden, not_found,
    unauthenticated, validation_failure,
)


@pytest.mark.parametrize("kind, expected", [
    (FailureKind.VALIDATION, 400),
    (FailureKind.UNAUTHENTICATED, 401),
    (FailureKind.FORBIDDEN, 403),
    (FailureKind.NOT_FOUND, 404),
    (FailureKind.CONFLICT, 409),
    (FailureKind.INTERNAL, 500),
])
def test_status_for_each_kind(kind, expected):
    assert status_for(kind) == expected


def test_every_kind_has_a_status():
    statuses = {status_for(kind) for kind in FailureKind}
    assert len(statuses) == len(FailureKind)


def test_ok_wraps_data():
    envelope = ok({"x": 1})
    assert envelope.status == 200
    assert envelope.body == {"data": {"x": 1}}


def test_created_is_201():
    assert created([]).status == 201
    assert created([]).body == {"data": []}


def test_no_content_has_no_body():
    envelope = no_content()
    assert envelope.status == 204
    assert envelope.body is None


def test_failure_without_details_omits_key():
    envelope = from_failure(unauthenticated())
    assert envelope.status == 401
    assert envelope.body == {
        "error": {"kind": "unauthenticated", "message": "Authentication required"},
    }


def test_failure_with_details_keeps_them():
    details = [{"field": "email", "message": "bad", "type": "value_error"}]
    envelope = from_failure(validation_failure("Invalid request data", details))
    assert envelope.status == 400
    assert envelope.body["error"]["details"] == details


def test_not_found_carries_resource_identifier():
    envelope = from_failure(not_found("learning_language", "abc"))
    assert envelope.status == 404
    assert envelope.body["error"]["details"] == {
        "resource": "learning_language", "id": "abc",
    }


def test_internal_failure_message_is_generic():
    envelope = from_failure(INTERNAL_FAILURE)
    assert envelope.status == 500
    assert envelope.body["error"]["message"] == "An unexpected error occurred"
    assert "details" not in envelope.body["error"]


def test_forbidden_and_conflict_kinds_serialize_as_strings():
    assert from_failure(forbidden()).body["error"]["kind"] == "forbidden"
    assert from_failure(conflict("dup")).body["error"]["kind"] == "conflict"


def test_failure_is_immutable():
    failure = Failure(FailureKind.CONFLICT, "dup")
    with pytest.raises(AttributeError):
        failure.message = "other"


def test_http_status_without_failure_kind():
    envelope = from_http_status(405)
    assert envelope.status == 405
    assert envelope.body == {
        "error": {"kind": "http_error", "message": "Method Not Allowed"},
    }


def test_http_status_matching_a_failure_kind_reuses_it():
    assert from_http_status(401).body["error"]["kind"] == "unauthenticated"
