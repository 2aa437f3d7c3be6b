"""Auth Routes — register, login, logout, and session status.

Invariants:
    - Order per handler: validate input → resolve session (if required) → service → envelope
    - Logout and session status require a live session (401 otherwise)
    - Logout revokes eagerly: repeating it with the same token is 401
"""

from fastapi import APIRouter, Depends, Request, status

from wordbank.api.dependencies import (
    get_auth_service, get_session_resolver, read_json_body,
)
from wordbank.api.responses import respond
from wordbank.core.envelope import created
from wordbank.core.errors import Failure
from wordbank.core.result import Ok
from wordbank.schemas.validate import validate
from wordbank.services.auth_service import AuthService
from wordbank.services.session_resolver import SessionResolver

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: Request, auth: AuthService = Depends(get_auth_service),
):
    """Register with email, password, and preferred interface language."""
    command = validate("register", await read_json_body(request))
    if isinstance(command, Failure):
        return respond(command, request=request)
    return respond(await auth.register(command), created, request)


@router.post("/login")
async def login(
    request: Request, auth: AuthService = Depends(get_auth_service),
):
    """Exchange email + password for a session."""
    command = validate("login", await read_json_body(request))
    if isinstance(command, Failure):
        return respond(command, request=request)
    return respond(await auth.login(command), request=request)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    auth: AuthService = Depends(get_auth_service),
):
    """End the current session."""
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(await auth.logout(resolver.token), request=request)


@router.get("/session")
async def session_status(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
):
    """Report the caller's session: user id and expiry."""
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(Ok(await resolver.session_status()), request=request)
