"""Word Service — vocabulary entries inside the caller's categories.

Invariants:
    - A word is reachable only by its owner; foreign ids are NotFound
    - Terms are unique within a category (409 on clash)
    - A new word inherits user and learning language from its category
    - Random order shuffles within a page; which words land on a page is
      stable across requests

Design Decisions:
    - Global search matches term OR translation, case-insensitively
    - Filters on foreign learning languages or categories simply match nothing
"""

import logging
import random

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.core.domain_types import CategoryId, UserId, WordId, WordOrder
from wordbank.core.errors import Failure, conflict, not_found
from wordbank.core.pagination import page_offset, trim_to_page
from wordbank.core.result import Ok, Outcome
from wordbank.models.category import Category
from wordbank.models.word import Word
from wordbank.schemas.commands import (
    CategoryWordsQuery, CreateWordCommand, SearchWordsQuery, UpdateWordCommand,
)
from wordbank.schemas.dtos import (
    CategoryWordsListDto, PageMetaDto, WordDetailDto, WordDto, WordPageMetaDto,
    WordsListDto,
)
from wordbank.services.category_service import RESOURCE_TYPE as CATEGORY
from wordbank.services.scoping import contains, load_owned, ordered

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "word"
DUPLICATE_TERM_MESSAGE = "A word with this term already exists in this category"


def word_dto(row: Word) -> WordDto:
    return WordDto(
        id=row.id,
        learning_language_id=row.user_learning_language_id,
        category_id=row.category_id,
        term=row.term,
        translation=row.translation,
        examples_md=row.examples_md,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _order_column(order_by: WordOrder):
    match order_by:
        case WordOrder.TERM:
            return Word.term
        case WordOrder.RANDOM:
            return Word.id
        case _:
            return Word.created_at


class WordService:
    """Word CRUD and search, scoped to the calling user."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_category_words(
        self, user_id: UserId, category_id: CategoryId, query: CategoryWordsQuery,
    ) -> Outcome[CategoryWordsListDto]:
        category = await load_owned(
            self.db, Category, category_id, user_id, CATEGORY,
        )
        if isinstance(category, Failure):
            return category

        result = await self.db.execute(
            select(Word)
            .where(Word.category_id == category_id)
            .where(Word.user_id == user_id)
            .order_by(
                ordered(_order_column(query.order_by), query.direction), Word.id,
            )
            .offset(page_offset(query.page, query.page_size))
            .limit(query.page_size + 1),
        )
        items, meta = trim_to_page(
            result.scalars().all(), query.page, query.page_size,
        )
        if query.order_by is WordOrder.RANDOM:
            random.shuffle(items)
        return Ok(CategoryWordsListDto(
            words=[word_dto(row) for row in items],
            meta=WordPageMetaDto.from_meta(
                meta,
                view=query.view.value,
                order_by=query.order_by.value,
                direction=query.direction.value,
            ),
        ))

    async def search_words(
        self, user_id: UserId, query: SearchWordsQuery,
    ) -> Outcome[WordsListDto]:
        stmt = select(Word).where(Word.user_id == user_id)
        if query.learning_language_id is not None:
            stmt = stmt.where(
                Word.user_learning_language_id == query.learning_language_id,
            )
        if query.category_id is not None:
            stmt = stmt.where(Word.category_id == query.category_id)
        if query.search:
            stmt = stmt.where(or_(
                contains(Word.term, query.search),
                contains(Word.translation, query.search),
            ))
        result = await self.db.execute(
            stmt.order_by(
                ordered(_order_column(WordOrder(query.order_by.value)), query.direction),
                Word.id,
            )
            .offset(page_offset(query.page, query.page_size))
            .limit(query.page_size + 1),
        )
        items, meta = trim_to_page(
            result.scalars().all(), query.page, query.page_size,
        )
        return Ok(WordsListDto(
            words=[word_dto(row) for row in items],
            meta=PageMetaDto.from_meta(meta),
        ))

    async def create_word(
        self, user_id: UserId, category_id: CategoryId, command: CreateWordCommand,
    ) -> Outcome[WordDto]:
        category = await load_owned(
            self.db, Category, category_id, user_id, CATEGORY,
        )
        if isinstance(category, Failure):
            return category

        word = Word(
            user_id=user_id,
            user_learning_language_id=category.value.user_learning_language_id,
            category_id=category_id,
            term=command.term,
            translation=command.translation,
            examples_md=command.examples_md,
        )
        self.db.add(word)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            return conflict(DUPLICATE_TERM_MESSAGE)
        return Ok(word_dto(word))

    async def get_word(
        self, user_id: UserId, word_id: WordId,
    ) -> Outcome[WordDetailDto]:
        word = await load_owned(self.db, Word, word_id, user_id, RESOURCE_TYPE)
        if isinstance(word, Failure):
            return word
        return Ok(WordDetailDto(
            **word_dto(word.value).model_dump(), user_id=word.value.user_id,
        ))

    async def update_word(
        self, user_id: UserId, word_id: WordId, command: UpdateWordCommand,
    ) -> Outcome[WordDto]:
        word = await load_owned(self.db, Word, word_id, user_id, RESOURCE_TYPE)
        if isinstance(word, Failure):
            return word

        for field, value in command.changes().items():
            setattr(word.value, field, value)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            return conflict(DUPLICATE_TERM_MESSAGE)
        return Ok(word_dto(word.value))

    async def delete_word(
        self, user_id: UserId, word_id: WordId,
    ) -> Outcome[None]:
        word = await load_owned(self.db, Word, word_id, user_id, RESOURCE_TYPE)
        if isinstance(word, Failure):
            return word

        result = await self.db.execute(
            delete(Word).where(Word.id == word_id).where(Word.user_id == user_id),
        )
        await self.db.commit()
        if result.rowcount == 0:
            return not_found(RESOURCE_TYPE, str(word_id))
        return Ok(None)
