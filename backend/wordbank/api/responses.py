"""Response Adapter — turns service outcomes into Starlette responses.

Invariants:
    - Status codes come from core.envelope only; this module just serializes
    - Ok(None) is always 204 with an empty body
    - Every Failure is logged once here with its kind
"""

import logging
from typing import Any, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wordbank.core.envelope import Envelope, from_failure, no_content, ok
from wordbank.core.errors import Failure
from wordbank.core.result import Outcome

logger = logging.getLogger(__name__)


def to_response(envelope: Envelope) -> Response:
    if envelope.body is None:
        return Response(status_code=envelope.status)
    return JSONResponse(status_code=envelope.status, content=envelope.body)


def to_payload(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return value


def respond(
    outcome: Outcome[Any],
    success: Callable[[Any], Envelope] = ok,
    request: Request | None = None,
) -> Response:
    """Ok → success envelope (or 204 for None); Failure → error envelope."""
    if isinstance(outcome, Failure):
        logger.warning(
            f"Request failed: {outcome.message}",
            extra={
                "failure_kind": outcome.kind.value,
                "path": request.url.path if request else None,
            },
        )
        return to_response(from_failure(outcome))
    if outcome.value is None:
        return to_response(no_content())
    return to_response(success(to_payload(outcome.value)))
