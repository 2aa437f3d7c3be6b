"""Vocabulary Overview Route — all of the caller's words in one flat list."""

from fastapi import APIRouter, Depends, Request

from wordbank.api.dependencies import (
    get_session_resolver, get_vocabulary_overview_service,
)
from wordbank.api.responses import respond
from wordbank.core.errors import Failure
from wordbank.schemas.validate import validate
from wordbank.services.session_resolver import SessionResolver
from wordbank.services.vocabulary_overview_service import VocabularyOverviewService

router = APIRouter(prefix="/api/v1/vocabulary-overview", tags=["vocabulary"])


@router.get("")
async def get_vocabulary_overview(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: VocabularyOverviewService = Depends(get_vocabulary_overview_service),
):
    query = validate("vocabulary_overview_query", dict(request.query_params))
    if isinstance(query, Failure):
        return respond(query, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(await service.get_overview(user_id.value, query), request=request)
