"""Failure Taxonomy — closed, typed description of why an operation did not succeed.

Invariants:
    - FailureKind is closed: adding a member must be matched in envelope.status_for()
    - Failure is immutable and carries only client-safe text (no exception messages)
    - details is None or JSON-serializable (field errors, resource identifiers)

Design Decisions:
    - Failures are values, not exceptions: services return Ok | Failure so the
      envelope builder is the single place that interprets them
    - Constructors per kind keep messages uniform across services
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FailureKind(str, Enum):
    """Every way a request can fail. Serialized as the `kind` field."""
    VALIDATION = "validation"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Failure:
    """A failed operation outcome."""
    kind: FailureKind
    message: str
    details: Any = None


def validation_failure(
    message: str, details: list[dict] | None = None,
) -> Failure:
    return Failure(FailureKind.VALIDATION, message, details)


def field_failure(field: str, message: str, error_type: str = "value_error") -> Failure:
    """Validation failure for a single field, shaped like schema field errors."""
    return validation_failure(
        "Invalid request data",
        [{"field": field, "message": message, "type": error_type}],
    )


def unauthenticated(message: str = "Authentication required") -> Failure:
    return Failure(FailureKind.UNAUTHENTICATED, message)


def forbidden(message: str = "Access forbidden") -> Failure:
    return Failure(FailureKind.FORBIDDEN, message)


def not_found(resource_type: str, resource_id: str) -> Failure:
    return Failure(
        FailureKind.NOT_FOUND,
        f"{resource_type} not found",
        {"resource": resource_type, "id": resource_id},
    )


def conflict(message: str) -> Failure:
    return Failure(FailureKind.CONFLICT, message)


INTERNAL_FAILURE = Failure(FailureKind.INTERNAL, "An unexpected error occurred")
