"""API Dependencies — FastAPI providers for the session, services, and raw input.

Invariants:
    - One AsyncSession per request, shared by the session store and services
    - The bearer token is read from the Authorization header only
    - read_json_body never raises: unparseable input becomes None and the
      validator reports it as a "body" field error
"""

from typing import Any

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.config import Settings, get_settings
from wordbank.core.repository_protocols import SessionStore
from wordbank.infrastructure.database import get_db
from wordbank.infrastructure.passwords import PasswordHasher
from wordbank.infrastructure.session_store import DatabaseSessionStore
from wordbank.services.auth_service import AuthService
from wordbank.services.category_service import CategoryService
from wordbank.services.language_service import LanguageService
from wordbank.services.learning_language_service import LearningLanguageService
from wordbank.services.profile_service import ProfileService
from wordbank.services.session_resolver import SessionResolver
from wordbank.services.testing_reset_service import TestingResetService
from wordbank.services.vocabulary_overview_service import VocabularyOverviewService
from wordbank.services.word_service import WordService


def bearer_token(authorization: str | None = Header(None)) -> str | None:
    """Extract the token from `Authorization: Bearer <token>`."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


def get_session_store(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SessionStore:
    return DatabaseSessionStore(db, settings.session_ttl_minutes)


def get_session_resolver(
    store: SessionStore = Depends(get_session_store),
    token: str | None = Depends(bearer_token),
) -> SessionResolver:
    return SessionResolver(store, token)


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return PasswordHasher(settings.password_pepper)


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(db, store, hasher)


def get_language_service(db: AsyncSession = Depends(get_db)) -> LanguageService:
    return LanguageService(db)


def get_learning_language_service(
    db: AsyncSession = Depends(get_db),
) -> LearningLanguageService:
    return LearningLanguageService(db)


def get_profile_service(db: AsyncSession = Depends(get_db)) -> ProfileService:
    return ProfileService(db)


def get_testing_reset_service(
    db: AsyncSession = Depends(get_db),
) -> TestingResetService:
    return TestingResetService(db)


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_word_service(db: AsyncSession = Depends(get_db)) -> WordService:
    return WordService(db)


def get_vocabulary_overview_service(
    db: AsyncSession = Depends(get_db),
) -> VocabularyOverviewService:
    return VocabularyOverviewService(db)
