"""Language Routes — public catalog listing."""

from fastapi import APIRouter, Depends, Request

from wordbank.api.dependencies import get_language_service
from wordbank.api.responses import respond
from wordbank.core.errors import Failure
from wordbank.schemas.validate import validate
from wordbank.services.language_service import LanguageService

router = APIRouter(prefix="/api/v1/languages", tags=["languages"])


@router.get("")
async def list_languages(
    request: Request,
    languages: LanguageService = Depends(get_language_service),
):
    """List supported languages, optionally filtered by ?scope=learnable|registration|all."""
    query = validate("languages_query", dict(request.query_params))
    if isinstance(query, Failure):
        return respond(query, request=request)
    return respond(await languages.get_languages(query), request=request)
