"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - The session store is the single source of truth for who is logged in
    - Raw tokens cross this boundary only at creation time; stores persist digests

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake store
    - Async in Protocol: implementations do IO
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from wordbank.core.domain_types import UserId


@dataclass(frozen=True)
class IssuedSession:
    """A freshly created session: the only place the raw token exists."""
    token: str
    user_id: UserId
    expires_at: datetime


@dataclass(frozen=True)
class SessionRecord:
    """A resolved, unexpired session."""
    user_id: UserId
    expires_at: datetime


class SessionStore(Protocol):
    """Contract for the session mechanism, implemented by shell."""
    async def create(self, user_id: UserId) -> IssuedSession: ...
    async def resolve(self, token: str) -> SessionRecord | None: ...
    async def destroy(self, token: str) -> bool: ...
