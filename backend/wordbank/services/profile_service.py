"""Profile Service — read and update the caller's own profile.

Invariants:
    - A user can only ever address their own profile (keyed by resolved user id)
    - Update with no fields is a no-op that returns the current profile
"""

from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.core.domain_types import UserId
from wordbank.core.errors import not_found
from wordbank.core.result import Ok, Outcome
from wordbank.models.profile import Profile
from wordbank.schemas.commands import UpdateProfileCommand
from wordbank.schemas.dtos import ProfileDto
from wordbank.services.auth_service import profile_dto


class ProfileService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_profile(self, user_id: UserId) -> Outcome[ProfileDto]:
        profile = await self.db.get(Profile, user_id)
        if profile is None:
            return not_found("profile", str(user_id))
        return Ok(profile_dto(profile))

    async def update_profile(
        self, user_id: UserId, command: UpdateProfileCommand,
    ) -> Outcome[ProfileDto]:
        profile = await self.db.get(Profile, user_id)
        if profile is None:
            return not_found("profile", str(user_id))
        changes = command.model_dump(exclude_unset=True)
        if changes:
            for field, value in changes.items():
                setattr(profile, field, value)
            await self.db.commit()
            await self.db.refresh(profile)
        return Ok(profile_dto(profile))
