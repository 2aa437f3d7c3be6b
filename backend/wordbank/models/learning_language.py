"""UserLearningLanguage ORM — a user's enrollment in a language they study.

Invariants:
    - Owned resource: user_id is the owner, checked before any mutation
    - (user_id, language_id) is unique: a language is enrolled at most once

Design Decisions:
    - Deletes are scoped by (id, user_id) so a concurrent or foreign delete
      affects zero rows and surfaces as NotFound
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from wordbank.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class UserLearningLanguage(Base):
    """Learning-language enrollment."""
    __tablename__ = "user_learning_languages"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "language_id",
            name="user_learning_languages_user_language_key",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_id: Mapped[str] = mapped_column(
        String(10), ForeignKey("languages.code"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )
