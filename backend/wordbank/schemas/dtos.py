"""Response DTOs — public-facing shapes returned inside {"data": ...}.

Invariants:
    - DTOs never carry password hashes or token digests
    - Serialized with camelCase keys (by_alias) and ISO-8601 datetimes

Design Decisions:
    - One flat module: every DTO is small and shared across a couple of routes
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, SerializeAsAny
from pydantic.alias_generators import to_camel

from wordbank.core.pagination import PageMeta


class Dto(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )


class SessionDto(Dto):
    access_token: str
    expires_at: datetime


class ProfileDto(Dto):
    user_id: UUID
    user_language: str
    display_name: str | None
    created_at: datetime
    updated_at: datetime


class RegisterResultDto(Dto):
    user_id: UUID
    email: str
    session: SessionDto
    profile: ProfileDto


class LoginResultDto(Dto):
    user_id: UUID
    email: str
    session: SessionDto


class SessionStatusDto(Dto):
    authenticated: bool
    user_id: UUID | None = None
    expires_at: datetime | None = None


class LanguageDto(Dto):
    code: str
    name: str


class LanguagesListDto(Dto):
    languages: list[LanguageDto]


class LearningLanguageStatsDto(Dto):
    categories: int
    words: int


class LearningLanguageDto(Dto):
    id: UUID
    language_id: str
    created_at: datetime
    updated_at: datetime


class LearningLanguageWithStatsDto(LearningLanguageDto):
    stats: LearningLanguageStatsDto


class PageMetaDto(Dto):
    page: int
    page_size: int
    has_more: bool

    @classmethod
    def from_meta(cls, meta: PageMeta, **extra) -> "PageMetaDto":
        return cls(
            page=meta.page, page_size=meta.page_size, has_more=meta.has_more, **extra,
        )


class LearningLanguagesListDto(Dto):
    # Items keep their subclass fields (stats) when serialized
    learning_languages: list[SerializeAsAny[LearningLanguageDto]]
    meta: PageMetaDto


class CategoryDto(Dto):
    id: UUID
    learning_language_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
    word_count: int


class CategoriesListDto(Dto):
    categories: list[CategoryDto]
    meta: PageMetaDto


class WordDto(Dto):
    id: UUID
    learning_language_id: UUID
    category_id: UUID
    term: str
    translation: str
    examples_md: str
    created_at: datetime
    updated_at: datetime


class WordDetailDto(WordDto):
    user_id: UUID


class WordPageMetaDto(PageMetaDto):
    view: str
    order_by: str
    direction: str


class CategoryWordsListDto(Dto):
    words: list[WordDto]
    meta: WordPageMetaDto


class WordsListDto(Dto):
    words: list[WordDto]
    meta: PageMetaDto


class VocabularyOverviewEntryDto(Dto):
    learning_language_id: UUID
    learning_language_code: str
    category_id: UUID
    category_name: str
    word_id: UUID
    term: str
    translation: str
    created_at: datetime


class VocabularyOverviewDto(Dto):
    entries: list[VocabularyOverviewEntryDto]
    meta: PageMetaDto
