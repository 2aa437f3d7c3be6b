"""SQLAlchemy Declarative Base — shared metadata for every Wordbank table.

Invariants:
    - All models inherit from Base; alembic autogenerate reads Base.metadata
    - Constraint names are deterministic (naming convention), so migrations
      and IntegrityError messages refer to stable names
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "%(table_name)s_%(column_0_name)s_key",
    "fk": "%(table_name)s_%(column_0_name)s_fkey",
    "pk": "%(table_name)s_pkey",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
