"""Language Catalog — the seed fixture and scope filtering for supported languages.

Invariants:
    - LANGUAGE_FIXTURE is the known state the catalog is reset to
    - select_languages is deterministic: stable sort by name, then code
    - ALL scope returns every language; other scopes filter by availability flag

Design Decisions:
    - Fixture lives in core (not in a migration only): the test reset and the
      initial migration seed from the same list
"""

from dataclasses import dataclass
from typing import Iterable

from wordbank.core.domain_types import LanguageCode, LanguageScope


@dataclass(frozen=True)
class CatalogLanguage:
    """One supported language and where it may be used."""
    code: LanguageCode
    name: str
    available_for_registration: bool = True
    available_for_learning: bool = True


LANGUAGE_FIXTURE: tuple[CatalogLanguage, ...] = (
    CatalogLanguage("en", "English"),
    CatalogLanguage("pl", "Polish"),
    CatalogLanguage("de", "German"),
    CatalogLanguage("es", "Spanish"),
    CatalogLanguage("fr", "French"),
    CatalogLanguage("it", "Italian"),
    CatalogLanguage("pt-BR", "Portuguese (Brazil)"),
    CatalogLanguage("uk", "Ukrainian", available_for_learning=False),
    CatalogLanguage("ja", "Japanese", available_for_registration=False),
)


def in_scope(language: CatalogLanguage, scope: LanguageScope) -> bool:
    if scope is LanguageScope.LEARNABLE:
        return language.available_for_learning
    if scope is LanguageScope.REGISTRATION:
        return language.available_for_registration
    return True


def select_languages(
    languages: Iterable[CatalogLanguage], scope: LanguageScope,
) -> list[CatalogLanguage]:
    """Filter by scope and order by display name."""
    return sorted(
        (lang for lang in languages if in_scope(lang, scope)),
        key=lambda lang: (lang.name.casefold(), lang.code),
    )
