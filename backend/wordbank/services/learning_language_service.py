"""Learning Language Service — a user's enrollments in languages they study.

Invariants:
    - Every query and mutation is scoped to the calling user
    - Delete order: look up → ownership check (403 collapsed to 404) → delete
    - A missing id is NotFound, never a silent success
    - Delete is scoped by (id, user_id): if the row vanished after the lookup
      (concurrent delete), zero rows are affected and the caller gets NotFound
    - Deleting an enrollment deletes its categories and their words

Design Decisions:
    - Listing fetches page_size + 1 rows to compute has_more without COUNT(*)
    - Stats are two grouped counts over the page's ids, not per-row queries
    - Children are deleted explicitly: SQLite test databases do not enforce
      ON DELETE CASCADE
"""

import logging
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.core.domain_types import LearningLanguageId, UserId
from wordbank.core.errors import Failure, conflict, field_failure, not_found
from wordbank.core.pagination import page_offset, trim_to_page
from wordbank.core.result import Ok, Outcome
from wordbank.models.category import Category
from wordbank.models.language import Language
from wordbank.models.learning_language import UserLearningLanguage
from wordbank.models.profile import Profile
from wordbank.models.word import Word
from wordbank.schemas.commands import (
    CreateLearningLanguageCommand, LearningLanguagesQuery,
)
from wordbank.schemas.dtos import (
    LearningLanguageDto, LearningLanguagesListDto, LearningLanguageStatsDto,
    LearningLanguageWithStatsDto, PageMetaDto,
)
from wordbank.services.scoping import load_owned

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "learning_language"


def learning_language_dto(row: UserLearningLanguage) -> LearningLanguageDto:
    return LearningLanguageDto(
        id=row.id,
        language_id=row.language_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class LearningLanguageService:
    """Enrollment CRUD with single-owner access."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_learning_languages(
        self, user_id: UserId, query: LearningLanguagesQuery,
    ) -> Outcome[LearningLanguagesListDto]:
        result = await self.db.execute(
            select(UserLearningLanguage)
            .where(UserLearningLanguage.user_id == user_id)
            .order_by(
                UserLearningLanguage.created_at.desc(),
                UserLearningLanguage.id,
            )
            .offset(page_offset(query.page, query.page_size))
            .limit(query.page_size + 1),
        )
        items, meta = trim_to_page(
            result.scalars().all(), query.page, query.page_size,
        )
        dtos = [learning_language_dto(row) for row in items]
        if query.include_stats:
            dtos = await self._with_stats(dtos)
        return Ok(LearningLanguagesListDto(
            learning_languages=dtos, meta=PageMetaDto.from_meta(meta),
        ))

    async def create_learning_language(
        self, user_id: UserId, command: CreateLearningLanguageCommand,
    ) -> Outcome[LearningLanguageDto]:
        language = await self.db.get(Language, command.language_id)
        if language is None or not language.available_for_learning:
            return field_failure(
                "languageId",
                f"Language '{command.language_id}' is not available",
                "language_unavailable",
            )

        profile = await self.db.get(Profile, user_id)
        if profile is None:
            return not_found("profile", str(user_id))
        if profile.user_language_id == command.language_id:
            return field_failure(
                "languageId",
                "Cannot add your interface language as a learning language",
                "interface_language",
            )

        enrollment = UserLearningLanguage(
            user_id=user_id, language_id=command.language_id,
        )
        self.db.add(enrollment)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            return conflict("You are already learning this language")

        logger.info(
            f"Enrolled in {command.language_id}", extra={"user_id": user_id},
        )
        return Ok(learning_language_dto(enrollment))

    async def delete_learning_language(
        self, user_id: UserId, learning_language_id: LearningLanguageId,
    ) -> Outcome[None]:
        enrollment = await load_owned(
            self.db, UserLearningLanguage, learning_language_id, user_id,
            RESOURCE_TYPE,
        )
        if isinstance(enrollment, Failure):
            return enrollment

        await self.db.execute(
            delete(Word)
            .where(Word.user_learning_language_id == learning_language_id)
            .where(Word.user_id == user_id),
        )
        await self.db.execute(
            delete(Category)
            .where(Category.user_learning_language_id == learning_language_id)
            .where(Category.user_id == user_id),
        )
        result = await self.db.execute(
            delete(UserLearningLanguage)
            .where(UserLearningLanguage.id == learning_language_id)
            .where(UserLearningLanguage.user_id == user_id),
        )
        await self.db.commit()
        if result.rowcount == 0:
            return not_found(RESOURCE_TYPE, str(learning_language_id))
        return Ok(None)

    async def _with_stats(
        self, dtos: list[LearningLanguageDto],
    ) -> list[LearningLanguageDto]:
        ids = [dto.id for dto in dtos]
        categories = await self._count_by_learning_language(Category, ids)
        words = await self._count_by_learning_language(Word, ids)
        return [
            LearningLanguageWithStatsDto(
                **dto.model_dump(),
                stats=LearningLanguageStatsDto(
                    categories=categories.get(dto.id, 0),
                    words=words.get(dto.id, 0),
                ),
            )
            for dto in dtos
        ]

    async def _count_by_learning_language(
        self, model: type[Category] | type[Word], ids: list[UUID],
    ) -> dict[UUID, int]:
        if not ids:
            return {}
        result = await self.db.execute(
            select(model.user_learning_language_id, func.count())
            .where(model.user_learning_language_id.in_(ids))
            .group_by(model.user_learning_language_id),
        )
        return dict(result.all())
