"""Authorization Guard — ownership checks and the test-reset admin gate.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return Failure on violation, None on success
    - An absent resource and a resource owned by someone else produce the
      SAME NotFound failure (existence is never disclosed to non-owners)
    - check_admin_reset evaluates both guards every time and fails closed

Design Decisions:
    - check_ownership still reports FORBIDDEN; check_owned_access is the
      caller-facing entry point that collapses it into NOT_FOUND
    - hmac.compare_digest for the admin token: comparison time does not
      depend on how many leading characters match
"""

import hmac
from typing import Protocol
from uuid import UUID

from wordbank.core.domain_types import Environment
from wordbank.core.errors import Failure, FailureKind, forbidden, not_found

RESET_FORBIDDEN_MESSAGE = "Test data reset is not permitted"


class OwnedResource(Protocol):
    """Anything carrying an owner user id."""
    user_id: UUID


def check_ownership(user_id: UUID, owner_id: UUID) -> Failure | None:
    """Caller must own the resource."""
    if user_id != owner_id:
        return forbidden("You do not own this resource")
    return None


def check_owned_access(
    resource: OwnedResource | None,
    user_id: UUID,
    resource_type: str,
    resource_id: str,
) -> Failure | None:
    """Existence first, then ownership. Both failures surface as NotFound."""
    missing = not_found(resource_type, resource_id)
    if resource is None:
        return missing
    failure = check_ownership(user_id, resource.user_id)
    if failure is not None and failure.kind is FailureKind.FORBIDDEN:
        return missing
    return failure


def check_admin_reset(
    environment: Environment,
    supplied_token: str | None,
    expected_token: str | None,
) -> Failure | None:
    """Test environment AND matching out-of-band token, both mandatory."""
    environment_ok = environment is Environment.TEST
    token_ok = _tokens_match(supplied_token, expected_token)
    if environment_ok & token_ok:
        return None
    return forbidden(RESET_FORBIDDEN_MESSAGE)


def _tokens_match(supplied: str | None, expected: str | None) -> bool:
    # Compare against a placeholder when unconfigured so the work done is the same
    configured = bool(expected)
    digest_ok = hmac.compare_digest(
        (supplied or "").encode(), (expected or "\0").encode(),
    )
    return configured & digest_ok
