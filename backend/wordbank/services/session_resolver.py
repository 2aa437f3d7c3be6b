"""Session Resolver — turns the request's bearer token into a verified user id.

Invariants:
    - The session store is consulted on every call (no caching across requests)
    - current_user_id() fails with Unauthenticated; session_status() never fails
    - Nothing outside this class and AuthService touches the session store
"""

from wordbank.core.errors import unauthenticated
from wordbank.core.repository_protocols import SessionRecord, SessionStore
from wordbank.core.result import Ok, Outcome
from wordbank.core.domain_types import UserId
from wordbank.schemas.dtos import SessionStatusDto


class SessionResolver:
    """Per-request view of the caller's session."""

    def __init__(self, store: SessionStore, token: str | None):
        self.store = store
        self.token = token

    async def _lookup(self) -> SessionRecord | None:
        if not self.token:
            return None
        return await self.store.resolve(self.token)

    async def current_user_id(self) -> Outcome[UserId]:
        record = await self._lookup()
        if record is None:
            return unauthenticated()
        return Ok(record.user_id)

    async def session_status(self) -> SessionStatusDto:
        record = await self._lookup()
        if record is None:
            return SessionStatusDto(authenticated=False)
        return SessionStatusDto(
            authenticated=True,
            user_id=record.user_id,
            expires_at=record.expires_at,
        )
