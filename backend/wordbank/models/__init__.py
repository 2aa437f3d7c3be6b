"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every user-owned table cascades on user deletion

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or autogenerate runs
"""

from wordbank.models.user import User  # noqa: F401
from wordbank.models.auth_session import AuthSession  # noqa: F401
from wordbank.models.language import Language  # noqa: F401
from wordbank.models.profile import Profile  # noqa: F401
from wordbank.models.learning_language import UserLearningLanguage  # noqa: F401
from wordbank.models.category import Category  # noqa: F401
from wordbank.models.word import Word  # noqa: F401
