"""Database Session Store — SessionStore implementation over the auth_sessions table.

Invariants:
    - Tokens are 256-bit URL-safe random strings; only their SHA-256 digest is stored
    - resolve() treats expired rows as absent and never caches
    - destroy() is a plain delete: returns whether a live row was removed

Design Decisions:
    - Opaque server-side tokens over self-contained JWTs: logout must be
      visible to the very next request, which a stateless token cannot give
    - Naive datetimes (SQLite) are read back as UTC
"""

import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.core.domain_types import UserId
from wordbank.core.repository_protocols import IssuedSession, SessionRecord
from wordbank.models.auth_session import AuthSession

logger = logging.getLogger(__name__)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class DatabaseSessionStore:
    """Server-side sessions persisted next to application data."""

    def __init__(self, db: AsyncSession, ttl_minutes: int):
        self.db = db
        self.ttl = timedelta(minutes=ttl_minutes)

    async def create(self, user_id: UserId) -> IssuedSession:
        token = secrets.token_urlsafe(32)
        expires_at = datetime.now(timezone.utc) + self.ttl
        self.db.add(AuthSession(
            user_id=user_id, token_hash=hash_token(token), expires_at=expires_at,
        ))
        await self.db.flush()
        return IssuedSession(token=token, user_id=user_id, expires_at=expires_at)

    async def resolve(self, token: str) -> SessionRecord | None:
        result = await self.db.execute(
            select(AuthSession).where(AuthSession.token_hash == hash_token(token)),
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        expires_at = as_utc(row.expires_at)
        if expires_at <= datetime.now(timezone.utc):
            return None
        return SessionRecord(user_id=UserId(row.user_id), expires_at=expires_at)

    async def destroy(self, token: str) -> bool:
        result = await self.db.execute(
            delete(AuthSession).where(AuthSession.token_hash == hash_token(token)),
        )
        await self.db.commit()
        removed = result.rowcount > 0
        if not removed:
            logger.info("Logout for a session that was already gone")
        return removed
