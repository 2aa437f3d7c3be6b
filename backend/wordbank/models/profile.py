"""Profile ORM — per-user preferences created at registration.

Invariants:
    - Exactly one profile per user (user_id is the primary key)
    - user_language_id references the catalog: the interface language
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from wordbank.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Profile(Base):
    """User profile."""
    __tablename__ = "profiles"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_language_id: Mapped[str] = mapped_column(
        String(10), ForeignKey("languages.code"), nullable=False,
    )
    display_name: Mapped[str | None] = mapped_column(
        String(100), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )
