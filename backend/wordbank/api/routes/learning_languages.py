"""Learning Language Routes — the caller's enrollments.

Invariants:
    - All endpoints require a live session
    - Input is validated before the session is resolved (400 wins over 401)
    - Deleting someone else's enrollment is 404, exactly like a missing one
"""

from fastapi import APIRouter, Depends, Request, status

from wordbank.api.dependencies import (
    get_learning_language_service, get_session_resolver, read_json_body,
)
from wordbank.api.responses import respond
from wordbank.core.domain_types import LearningLanguageId
from wordbank.core.envelope import created
from wordbank.core.errors import Failure
from wordbank.schemas.validate import validate
from wordbank.services.learning_language_service import LearningLanguageService
from wordbank.services.session_resolver import SessionResolver

router = APIRouter(prefix="/api/v1/learning-languages", tags=["learning-languages"])


@router.get("")
async def list_learning_languages(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: LearningLanguageService = Depends(get_learning_language_service),
):
    """Page through the caller's learning languages, newest first."""
    query = validate("learning_languages_query", dict(request.query_params))
    if isinstance(query, Failure):
        return respond(query, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.list_learning_languages(user_id.value, query),
        request=request,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_learning_language(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: LearningLanguageService = Depends(get_learning_language_service),
):
    """Enroll the caller in a new learning language."""
    command = validate("create_learning_language", await read_json_body(request))
    if isinstance(command, Failure):
        return respond(command, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.create_learning_language(user_id.value, command),
        created,
        request,
    )


@router.delete("/{learning_language_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_learning_language(
    learning_language_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: LearningLanguageService = Depends(get_learning_language_service),
):
    """Remove one of the caller's learning languages."""
    params = validate(
        "delete_learning_language", {"learningLanguageId": learning_language_id},
    )
    if isinstance(params, Failure):
        return respond(params, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.delete_learning_language(
            user_id.value, LearningLanguageId(params.learning_language_id),
        ),
        request=request,
    )
