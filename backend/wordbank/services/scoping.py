"""Owner Scoping — shared lookups and query fragments for owned resources.

Invariants:
    - load_owned never distinguishes "missing" from "someone else's":
      both are the same NotFound (see core.authorization.check_owned_access)
    - Search text is matched literally: LIKE wildcards in it are escaped
    - Every ordering ends with the primary key so pages are stable
"""

import logging
from typing import Any, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.core.authorization import check_owned_access
from wordbank.core.domain_types import SortDirection, UserId
from wordbank.core.result import Ok, Outcome

logger = logging.getLogger(__name__)

M = TypeVar("M")

_LIKE_ESCAPE = "\\"


async def load_owned(
    db: AsyncSession,
    model: type[M],
    resource_id: UUID,
    user_id: UserId,
    resource_type: str,
) -> Outcome[M]:
    """Fetch a row by id and require that the caller owns it."""
    row = await db.get(model, resource_id)
    denied = check_owned_access(row, user_id, resource_type, str(resource_id))
    if denied is not None:
        if row is not None:
            logger.warning(
                f"Access to {resource_type} {resource_id} by non-owner",
                extra={"user_id": user_id},
            )
        return denied
    return Ok(row)


def contains(column: Any, text: str):
    """Case-insensitive substring match on a column."""
    escaped = (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", f"{_LIKE_ESCAPE}%")
        .replace("_", f"{_LIKE_ESCAPE}_")
    )
    return column.ilike(f"%{escaped}%", escape=_LIKE_ESCAPE)


def ordered(column: Any, direction: SortDirection):
    return column.asc() if direction is SortDirection.ASC else column.desc()
