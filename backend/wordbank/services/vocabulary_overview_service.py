"""Vocabulary Overview Service — every word of the caller, flattened with its
category and learning language.

Invariants:
    - Only the caller's words appear, whatever filters are passed
    - Ordering ties break on word id, so pages never overlap
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.core.domain_types import OverviewOrder, UserId
from wordbank.core.pagination import page_offset, trim_to_page
from wordbank.core.result import Ok, Outcome
from wordbank.models.category import Category
from wordbank.models.learning_language import UserLearningLanguage
from wordbank.models.word import Word
from wordbank.schemas.commands import VocabularyOverviewQuery
from wordbank.schemas.dtos import (
    PageMetaDto, VocabularyOverviewDto, VocabularyOverviewEntryDto,
)
from wordbank.services.scoping import ordered

_ORDER_COLUMNS = {
    OverviewOrder.CREATED_AT: Word.created_at,
    OverviewOrder.CATEGORY: Category.name,
    OverviewOrder.LANGUAGE: UserLearningLanguage.language_id,
}


class VocabularyOverviewService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_overview(
        self, user_id: UserId, query: VocabularyOverviewQuery,
    ) -> Outcome[VocabularyOverviewDto]:
        stmt = (
            select(Word, Category.name, UserLearningLanguage.language_id)
            .join(Category, Word.category_id == Category.id)
            .join(
                UserLearningLanguage,
                Word.user_learning_language_id == UserLearningLanguage.id,
            )
            .where(Word.user_id == user_id)
        )
        if query.learning_language_id is not None:
            stmt = stmt.where(
                Word.user_learning_language_id == query.learning_language_id,
            )
        if query.category_id is not None:
            stmt = stmt.where(Word.category_id == query.category_id)

        result = await self.db.execute(
            stmt.order_by(
                ordered(_ORDER_COLUMNS[query.order_by], query.direction), Word.id,
            )
            .offset(page_offset(query.page, query.page_size))
            .limit(query.page_size + 1),
        )
        rows, meta = trim_to_page(result.all(), query.page, query.page_size)
        return Ok(VocabularyOverviewDto(
            entries=[
                VocabularyOverviewEntryDto(
                    learning_language_id=word.user_learning_language_id,
                    learning_language_code=language_code,
                    category_id=word.category_id,
                    category_name=category_name,
                    word_id=word.id,
                    term=word.term,
                    translation=word.translation,
                    created_at=word.created_at,
                )
                for word, category_name, language_code in rows
            ],
            meta=PageMetaDto.from_meta(meta),
        ))
