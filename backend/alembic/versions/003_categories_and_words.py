"""Vocabulary tables — categories and words.

Revision ID: 003_categories_words
Revises: 002_seed_languages
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "003_categories_words"
down_revision: Union[str, None] = "002_seed_languages"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _owner_columns() -> list[sa.Column]:
    return [
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "user_learning_language_id", UUID(as_uuid=True),
            sa.ForeignKey("user_learning_languages.id", ondelete="CASCADE"), nullable=False,
        ),
    ]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "categories",
        *_owner_columns(),
        sa.Column("name", sa.String(150), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("user_learning_language_id", "name", name="categories_learning_language_name_key"),
    )
    op.create_index("ix_categories_user_id", "categories", ["user_id"])
    op.create_index("ix_categories_user_learning_language_id", "categories", ["user_learning_language_id"])

    op.create_table(
        "words",
        *_owner_columns(),
        sa.Column("category_id", UUID(as_uuid=True), sa.ForeignKey("categories.id", ondelete="CASCADE"), nullable=False),
        sa.Column("term", sa.String(500), nullable=False),
        sa.Column("translation", sa.String(500), nullable=False),
        sa.Column("examples_md", sa.Text, nullable=False, server_default=""),
        *_timestamps(),
        sa.UniqueConstraint("category_id", "term", name="words_category_term_key"),
    )
    op.create_index("ix_words_user_id", "words", ["user_id"])
    op.create_index("ix_words_user_learning_language_id", "words", ["user_learning_language_id"])
    op.create_index("ix_words_category_id", "words", ["category_id"])


def downgrade() -> None:
    op.drop_table("words")
    op.drop_table("categories")
