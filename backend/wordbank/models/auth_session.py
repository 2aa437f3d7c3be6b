"""AuthSession ORM — server-side session records behind opaque bearer tokens.

Invariants:
    - token_hash is the SHA-256 hex digest of the token; the token itself is never stored
    - A row exists only while the session is live; logout deletes it
    - Rows past expires_at are treated as absent by the session store

Design Decisions:
    - Deleting on logout (not a revoked flag): revocation is visible to the
      very next lookup with no extra predicate
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from wordbank.db.base import Base


class AuthSession(Base):
    """A live login session."""
    __tablename__ = "auth_sessions"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token_hash: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True,
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
