"""Word Routes — words in a category, global word search, and words by id.

Invariants:
    - All endpoints require a live session
    - Path ids, then query/body, are validated before the session is resolved
    - A foreign category or word is 404, exactly like a missing one
"""

from fastapi import APIRouter, Depends, Request, status

from wordbank.api.dependencies import (
    get_session_resolver, get_word_service, read_json_body,
)
from wordbank.api.responses import respond
from wordbank.core.domain_types import CategoryId, WordId
from wordbank.core.envelope import created
from wordbank.core.errors import Failure
from wordbank.schemas.validate import validate
from wordbank.services.session_resolver import SessionResolver
from wordbank.services.word_service import WordService

router = APIRouter(prefix="/api/v1", tags=["words"])


@router.get("/categories/{category_id}/words")
async def list_category_words(
    category_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: WordService = Depends(get_word_service),
):
    """Page through a category's words in table or slider layout."""
    params = validate("category_params", {"categoryId": category_id})
    if isinstance(params, Failure):
        return respond(params, request=request)
    query = validate("category_words_query", dict(request.query_params))
    if isinstance(query, Failure):
        return respond(query, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.list_category_words(
            user_id.value, CategoryId(params.category_id), query,
        ),
        request=request,
    )


@router.post("/categories/{category_id}/words", status_code=status.HTTP_201_CREATED)
async def create_word(
    category_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: WordService = Depends(get_word_service),
):
    params = validate("category_params", {"categoryId": category_id})
    if isinstance(params, Failure):
        return respond(params, request=request)
    command = validate("create_word", await read_json_body(request))
    if isinstance(command, Failure):
        return respond(command, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.create_word(
            user_id.value, CategoryId(params.category_id), command,
        ),
        created,
        request,
    )


@router.get("/words")
async def search_words(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: WordService = Depends(get_word_service),
):
    """Search the caller's words by term or translation."""
    query = validate("search_words_query", dict(request.query_params))
    if isinstance(query, Failure):
        return respond(query, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(await service.search_words(user_id.value, query), request=request)


@router.get("/words/{word_id}")
async def get_word(
    word_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: WordService = Depends(get_word_service),
):
    params = validate("word_params", {"wordId": word_id})
    if isinstance(params, Failure):
        return respond(params, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.get_word(user_id.value, WordId(params.word_id)),
        request=request,
    )


@router.patch("/words/{word_id}")
async def update_word(
    word_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: WordService = Depends(get_word_service),
):
    params = validate("word_params", {"wordId": word_id})
    if isinstance(params, Failure):
        return respond(params, request=request)
    command = validate("update_word", await read_json_body(request))
    if isinstance(command, Failure):
        return respond(command, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.update_word(user_id.value, WordId(params.word_id), command),
        request=request,
    )


@router.delete("/words/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_word(
    word_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: WordService = Depends(get_word_service),
):
    params = validate("word_params", {"wordId": word_id})
    if isinstance(params, Failure):
        return respond(params, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.delete_word(user_id.value, WordId(params.word_id)),
        request=request,
    )
