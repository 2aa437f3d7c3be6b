"""Language Service — read-only access to the supported language catalog.

Invariants:
    - Side-effect free: never writes
    - Ordering is decided by core.language_catalog.select_languages (deterministic)
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.core.language_catalog import CatalogLanguage, select_languages
from wordbank.core.result import Ok, Outcome
from wordbank.models.language import Language
from wordbank.schemas.commands import LanguagesQuery
from wordbank.schemas.dtos import LanguageDto, LanguagesListDto


class LanguageService:
    """Language catalog queries."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_languages(self, query: LanguagesQuery) -> Outcome[LanguagesListDto]:
        result = await self.db.execute(select(Language))
        catalog = [
            CatalogLanguage(
                code=row.code,
                name=row.name,
                available_for_registration=row.available_for_registration,
                available_for_learning=row.available_for_learning,
            )
            for row in result.scalars().all()
        ]
        return Ok(LanguagesListDto(languages=[
            LanguageDto(code=lang.code, name=lang.name)
            for lang in select_languages(catalog, query.scope)
        ]))
