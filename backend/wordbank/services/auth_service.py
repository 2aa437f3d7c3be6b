"""Auth Service — registration, login, and logout against users + session store.

Invariants:
    - Emails are compared and stored lowercased
    - Wrong password and unknown email return the SAME Unauthenticated failure,
      and both run one password verification (no timing difference)
    - Registration validation problems (language, password policy) are
      reported together in one Failure
    - Duplicate email is Conflict, whether caught by the pre-check or by the
      unique constraint under a concurrent registration

Design Decisions:
    - The session is created in the same transaction as the user and profile:
      a registered user always comes back with a usable session
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.core.domain_types import UserId
from wordbank.core.errors import Failure, conflict, unauthenticated, validation_failure
from wordbank.core.password_policy import check_password_policy
from wordbank.core.repository_protocols import IssuedSession, SessionStore
from wordbank.core.result import Ok, Outcome
from wordbank.infrastructure.passwords import PasswordHasher
from wordbank.models.language import Language
from wordbank.models.profile import Profile
from wordbank.models.user import User
from wordbank.schemas.commands import LoginCommand, RegisterCommand
from wordbank.schemas.dtos import (
    LoginResultDto, ProfileDto, RegisterResultDto, SessionDto,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
DUPLICATE_EMAIL_MESSAGE = "Email address is already registered"


def session_dto(issued: IssuedSession) -> SessionDto:
    return SessionDto(access_token=issued.token, expires_at=issued.expires_at)


def profile_dto(profile: Profile) -> ProfileDto:
    return ProfileDto(
        user_id=profile.user_id,
        user_language=profile.user_language_id,
        display_name=profile.display_name,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


class AuthService:
    """Account and session lifecycle."""

    def __init__(
        self, db: AsyncSession, store: SessionStore, hasher: PasswordHasher,
    ):
        self.db = db
        self.store = store
        self.hasher = hasher

    async def register(self, command: RegisterCommand) -> Outcome[RegisterResultDto]:
        email = command.email.lower()
        invalid = await self._check_registration(command, email)
        if invalid is not None:
            return invalid

        existing = await self._find_user(email)
        if existing is not None:
            return conflict(DUPLICATE_EMAIL_MESSAGE)

        user = User(email=email, password_hash=self.hasher.hash(command.password))
        self.db.add(user)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            logger.info("Registration lost a duplicate-email race")
            return conflict(DUPLICATE_EMAIL_MESSAGE)

        profile = Profile(
            user_id=user.id, user_language_id=command.preferred_language_id,
        )
        self.db.add(profile)
        await self.db.flush()
        issued = await self.store.create(UserId(user.id))
        await self.db.commit()

        logger.info("User registered", extra={"user_id": user.id})
        return Ok(RegisterResultDto(
            user_id=user.id,
            email=user.email,
            session=session_dto(issued),
            profile=profile_dto(profile),
        ))

    async def login(self, command: LoginCommand) -> Outcome[LoginResultDto]:
        user = await self._find_user(command.email.lower())
        if user is None:
            self.hasher.verify_against_dummy(command.password)
            return unauthenticated(INVALID_CREDENTIALS_MESSAGE)
        if not self.hasher.verify(command.password, user.password_hash):
            return unauthenticated(INVALID_CREDENTIALS_MESSAGE)

        issued = await self.store.create(UserId(user.id))
        await self.db.commit()
        logger.info("User logged in", extra={"user_id": user.id})
        return Ok(LoginResultDto(
            user_id=user.id, email=user.email, session=session_dto(issued),
        ))

    async def logout(self, token: str) -> Outcome[None]:
        await self.store.destroy(token)
        return Ok(None)

    async def _find_user(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def _check_registration(
        self, command: RegisterCommand, email: str,
    ) -> Failure | None:
        """Collect every registration rule violation beyond the schema."""
        details: list[dict] = []
        language = await self.db.get(Language, command.preferred_language_id)
        if language is None or not language.available_for_registration:
            details.append({
                "field": "preferredLanguageId",
                "message": f"Language '{command.preferred_language_id}' is not available",
                "type": "language_unavailable",
            })
        policy = check_password_policy(command.password, email)
        if policy is not None:
            details.extend(policy.details)
        if not details:
            return None
        return validation_failure("Invalid request data", details)
