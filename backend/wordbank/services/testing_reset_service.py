"""Testing Reset Service — wipes all mutable data back to the fixture state.

Invariants:
    - Nothing is deleted unless check_admin_reset passes (test env AND token)
    - Deletion runs child tables first, then reseeds the language catalog,
      all in one transaction
    - After a reset the database holds exactly LANGUAGE_FIXTURE and nothing else

Design Decisions:
    - Explicit delete order instead of relying on ON DELETE CASCADE: SQLite
      test databases do not enforce foreign keys by default
"""

import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.core.authorization import check_admin_reset
from wordbank.core.domain_types import Environment
from wordbank.core.language_catalog import LANGUAGE_FIXTURE
from wordbank.core.result import Ok, Outcome
from wordbank.models.auth_session import AuthSession
from wordbank.models.category import Category
from wordbank.models.language import Language
from wordbank.models.learning_language import UserLearningLanguage
from wordbank.models.profile import Profile
from wordbank.models.user import User
from wordbank.models.word import Word
from wordbank.schemas.commands import TestResetCommand

logger = logging.getLogger(__name__)

# Child tables first
_RESET_ORDER = (
    Word, Category, UserLearningLanguage, Profile, AuthSession, User, Language,
)


async def seed_languages(db: AsyncSession) -> None:
    """Insert the catalog fixture. Caller commits."""
    db.add_all(
        Language(
            code=lang.code,
            name=lang.name,
            available_for_registration=lang.available_for_registration,
            available_for_learning=lang.available_for_learning,
        )
        for lang in LANGUAGE_FIXTURE
    )
    await db.flush()


class TestingResetService:
    """Test-environment-only data reset."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def reset_database(
        self,
        command: TestResetCommand,
        environment: Environment,
        expected_token: str | None,
    ) -> Outcome[None]:
        denied = check_admin_reset(environment, command.admin_token, expected_token)
        if denied is not None:
            logger.warning(
                "Rejected test data reset",
                extra={"failure_kind": denied.kind.value},
            )
            return denied

        for model in _RESET_ORDER:
            await self.db.execute(delete(model))
        await seed_languages(self.db)
        await self.db.commit()
        logger.info("Test database reset completed")
        return Ok(None)
