"""Language ORM — the supported language catalog.

Invariants:
    - code is the primary key ("en", "pt-BR")
    - Seeded from core.language_catalog.LANGUAGE_FIXTURE (migration + test reset)
"""

from sqlalchemy import String, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from wordbank.db.base import Base


class Language(Base):
    """Catalog entry."""
    __tablename__ = "languages"

    code: Mapped[str] = mapped_column(String(10), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    available_for_registration: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    available_for_learning: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
