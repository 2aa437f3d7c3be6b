"""Seed the language catalog from the application fixture.

Revision ID: 002_seed_languages
Revises: 001_initial
Create Date: 2026-10-17

The same fixture is used by the test-data reset, so a migrated database and a
freshly reset one start from an identical catalog.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from wordbank.core.language_catalog import LANGUAGE_FIXTURE

revision: str = "002_seed_languages"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_languages = sa.table(
    "languages",
    sa.column("code", sa.String),
    sa.column("name", sa.String),
    sa.column("available_for_registration", sa.Boolean),
    sa.column("available_for_learning", sa.Boolean),
)


def upgrade() -> None:
    op.bulk_insert(_languages, [
        {
            "code": lang.code,
            "name": lang.name,
            "available_for_registration": lang.available_for_registration,
            "available_for_learning": lang.available_for_learning,
        }
        for lang in LANGUAGE_FIXTURE
    ])


def downgrade() -> None:
    codes = [lang.code for lang in LANGUAGE_FIXTURE]
    op.execute(_languages.delete().where(_languages.c.code.in_(codes)))
