"""Category Service — named word groups inside one of the caller's learning languages.

Invariants:
    - The parent learning language must be the caller's; otherwise NotFound
    - Category names are unique per learning language (409 on clash)
    - Deleting a category deletes its words in the same transaction
    - Every listed category carries its current word count

Design Decisions:
    - word_count is a correlated scalar subquery, so one round trip per page
    - Search is a literal, case-insensitive substring match on the name
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.core.domain_types import (
    CategoryId, CategoryOrder, LearningLanguageId, UserId,
)
from wordbank.core.errors import Failure, conflict, not_found
from wordbank.core.pagination import page_offset, trim_to_page
from wordbank.core.result import Ok, Outcome
from wordbank.models.category import Category
from wordbank.models.learning_language import UserLearningLanguage
from wordbank.models.word import Word
from wordbank.schemas.commands import CategoriesQuery, CategoryNameCommand
from wordbank.schemas.dtos import CategoriesListDto, CategoryDto, PageMetaDto
from wordbank.services.learning_language_service import (
    RESOURCE_TYPE as LEARNING_LANGUAGE,
)
from wordbank.services.scoping import contains, load_owned, ordered

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "category"
DUPLICATE_NAME_MESSAGE = "A category with this name already exists"

_ORDER_COLUMNS = {
    CategoryOrder.CREATED_AT: Category.created_at,
    CategoryOrder.NAME: Category.name,
}


def _word_count():
    return (
        select(func.count(Word.id))
        .where(Word.category_id == Category.id)
        .correlate(Category)
        .scalar_subquery()
    )


def category_dto(row: Category, word_count: int) -> CategoryDto:
    return CategoryDto(
        id=row.id,
        learning_language_id=row.user_learning_language_id,
        name=row.name,
        created_at=row.created_at,
        updated_at=row.updated_at,
        word_count=word_count,
    )


class CategoryService:
    """Category CRUD, scoped through the owning learning language."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_categories(
        self,
        user_id: UserId,
        learning_language_id: LearningLanguageId,
        query: CategoriesQuery,
    ) -> Outcome[CategoriesListDto]:
        parent = await load_owned(
            self.db, UserLearningLanguage, learning_language_id, user_id,
            LEARNING_LANGUAGE,
        )
        if isinstance(parent, Failure):
            return parent

        stmt = (
            select(Category, _word_count())
            .where(Category.user_learning_language_id == learning_language_id)
            .where(Category.user_id == user_id)
        )
        if query.search:
            stmt = stmt.where(contains(Category.name, query.search))
        result = await self.db.execute(
            stmt.order_by(
                ordered(_ORDER_COLUMNS[query.order_by], query.direction),
                Category.id,
            )
            .offset(page_offset(query.page, query.page_size))
            .limit(query.page_size + 1),
        )
        rows, meta = trim_to_page(result.all(), query.page, query.page_size)
        return Ok(CategoriesListDto(
            categories=[category_dto(row, count) for row, count in rows],
            meta=PageMetaDto.from_meta(meta),
        ))

    async def create_category(
        self,
        user_id: UserId,
        learning_language_id: LearningLanguageId,
        command: CategoryNameCommand,
    ) -> Outcome[CategoryDto]:
        parent = await load_owned(
            self.db, UserLearningLanguage, learning_language_id, user_id,
            LEARNING_LANGUAGE,
        )
        if isinstance(parent, Failure):
            return parent

        category = Category(
            user_id=user_id,
            user_learning_language_id=learning_language_id,
            name=command.name,
        )
        self.db.add(category)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            return conflict(DUPLICATE_NAME_MESSAGE)

        logger.info(f"Created category {category.id}", extra={"user_id": user_id})
        return Ok(category_dto(category, 0))

    async def update_category(
        self, user_id: UserId, category_id: CategoryId, command: CategoryNameCommand,
    ) -> Outcome[CategoryDto]:
        category = await load_owned(
            self.db, Category, category_id, user_id, RESOURCE_TYPE,
        )
        if isinstance(category, Failure):
            return category

        category.value.name = command.name
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            return conflict(DUPLICATE_NAME_MESSAGE)

        count = await self.db.scalar(
            select(func.count(Word.id)).where(Word.category_id == category_id),
        )
        return Ok(category_dto(category.value, count))

    async def delete_category(
        self, user_id: UserId, category_id: CategoryId,
    ) -> Outcome[None]:
        category = await load_owned(
            self.db, Category, category_id, user_id, RESOURCE_TYPE,
        )
        if isinstance(category, Failure):
            return category

        await self.db.execute(
            delete(Word)
            .where(Word.category_id == category_id)
            .where(Word.user_id == user_id),
        )
        result = await self.db.execute(
            delete(Category)
            .where(Category.id == category_id)
            .where(Category.user_id == user_id),
        )
        await self.db.commit()
        if result.rowcount == 0:
            return not_found(RESOURCE_TYPE, str(category_id))
        logger.info(f"Deleted category {category_id}", extra={"user_id": user_id})
        return Ok(None)
