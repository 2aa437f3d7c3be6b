"""Response Envelope — uniform status code + body for every API response.

Invariants:
    - Success body is {"data": ...}; 204 has no body
    - Failure body is {"error": {"kind", "message", "details"?}}
    - Each FailureKind maps to exactly one status code (status_for)
    - This module is the only place failures become client-visible text
    - Framework HTTP errors (405, ...) use the same error shape, with the
      kind of the matching FailureKind or "http_error" when none matches

Design Decisions:
    - Pure functions returning an Envelope value: the transport layer
      (api/responses.py) only serializes, it never decides status codes
    - status_for ends in assert_never: a new FailureKind without a status
      is a type-checker error, not a silent 500
"""

from dataclasses import dataclass
from http.client import responses as HTTP_PHRASES
from typing import Any, assert_never

from wordbank.core.errors import Failure, FailureKind


@dataclass(frozen=True)
class Envelope:
    """Transport-neutral response: HTTP status + JSON body (None for 204)."""
    status: int
    body: dict | None


def status_for(kind: FailureKind) -> int:
    """Exhaustive failure kind → HTTP status mapping."""
    match kind:
        case FailureKind.VALIDATION:
            return 400
        case FailureKind.UNAUTHENTICATED:
            return 401
        case FailureKind.FORBIDDEN:
            return 403
        case FailureKind.NOT_FOUND:
            return 404
        case FailureKind.CONFLICT:
            return 409
        case FailureKind.INTERNAL:
            return 500
        case _:
            assert_never(kind)


def ok(data: Any) -> Envelope:
    return Envelope(200, {"data": data})


def created(data: Any) -> Envelope:
    return Envelope(201, {"data": data})


def no_content() -> Envelope:
    return Envelope(204, None)


def from_failure(failure: Failure) -> Envelope:
    """Build the error envelope. details omitted when absent."""
    error: dict[str, Any] = {
        "kind": failure.kind.value,
        "message": failure.message,
    }
    if failure.details is not None:
        error["details"] = failure.details
    return Envelope(status_for(failure.kind), {"error": error})


def from_http_status(status: int) -> Envelope:
    """Error envelope for an HTTP error raised by routing, not by a service."""
    kind = next(
        (k.value for k in FailureKind if status_for(k) == status), "http_error",
    )
    message = HTTP_PHRASES.get(status, "HTTP error")
    return Envelope(status, {"error": {"kind": kind, "message": message}})
