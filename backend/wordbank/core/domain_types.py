"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, LearningLanguageId, CategoryId, WordId wrap UUIDs; never use bare
      UUID in domain logic
    - LanguageCode is an ISO-like code ("en", "pt-BR"), the languages table key
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
LearningLanguageId = NewType("LearningLanguageId", UUID)
CategoryId = NewType("CategoryId", UUID)
WordId = NewType("WordId", UUID)
LanguageCode = NewType("LanguageCode", str)


# ─── Enums ───────────────────────────────────────────────────────

class Environment(str, Enum):
    """Deployment environment. Only TEST unlocks the data reset."""
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class LanguageScope(str, Enum):
    """Language catalog filter for GET /languages."""
    ALL = "all"
    LEARNABLE = "learnable"
    REGISTRATION = "registration"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class CategoryOrder(str, Enum):
    CREATED_AT = "createdAt"
    NAME = "name"


class WordOrder(str, Enum):
    """RANDOM shuffles within a page; pages themselves stay stable."""
    CREATED_AT = "createdAt"
    TERM = "term"
    RANDOM = "random"


class WordSearchOrder(str, Enum):
    CREATED_AT = "createdAt"
    TERM = "term"


class WordView(str, Enum):
    """Category word list layout. Caps the page size (table 50, slider 100)."""
    TABLE = "table"
    SLIDER = "slider"


class OverviewOrder(str, Enum):
    CREATED_AT = "createdAt"
    CATEGORY = "category"
    LANGUAGE = "language"
