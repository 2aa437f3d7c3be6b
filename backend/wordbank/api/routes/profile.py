"""Profile Routes — the caller's own profile."""

from fastapi import APIRouter, Depends, Request

from wordbank.api.dependencies import (
    get_profile_service, get_session_resolver, read_json_body,
)
from wordbank.api.responses import respond
from wordbank.core.errors import Failure
from wordbank.schemas.validate import validate
from wordbank.services.profile_service import ProfileService
from wordbank.services.session_resolver import SessionResolver

router = APIRouter(prefix="/api/v1/profile", tags=["profile"])


@router.get("")
async def get_profile(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    profiles: ProfileService = Depends(get_profile_service),
):
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(await profiles.get_profile(user_id.value), request=request)


@router.patch("")
async def update_profile(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    profiles: ProfileService = Depends(get_profile_service),
):
    """Update display name."""
    command = validate("update_profile", await read_json_body(request))
    if isinstance(command, Failure):
        return respond(command, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await profiles.update_profile(user_id.value, command), request=request,
    )
