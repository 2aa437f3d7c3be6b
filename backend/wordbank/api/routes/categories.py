"""Category Routes — categories under a learning language, and by id.

Invariants:
    - All endpoints require a live session
    - Path ids, then query/body, are validated before the session is resolved
    - A foreign learning language or category is 404, exactly like a missing one
"""

from fastapi import APIRouter, Depends, Request, status

from wordbank.api.dependencies import (
    get_category_service, get_session_resolver, read_json_body,
)
from wordbank.api.responses import respond
from wordbank.core.domain_types import CategoryId, LearningLanguageId
from wordbank.core.envelope import created
from wordbank.core.errors import Failure
from wordbank.schemas.validate import validate
from wordbank.services.category_service import CategoryService
from wordbank.services.session_resolver import SessionResolver

router = APIRouter(prefix="/api/v1", tags=["categories"])


@router.get("/learning-languages/{learning_language_id}/categories")
async def list_categories(
    learning_language_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: CategoryService = Depends(get_category_service),
):
    """Search and page through one learning language's categories."""
    params = validate(
        "learning_language_params", {"learningLanguageId": learning_language_id},
    )
    if isinstance(params, Failure):
        return respond(params, request=request)
    query = validate("categories_query", dict(request.query_params))
    if isinstance(query, Failure):
        return respond(query, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.list_categories(
            user_id.value, LearningLanguageId(params.learning_language_id), query,
        ),
        request=request,
    )


@router.post(
    "/learning-languages/{learning_language_id}/categories",
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    learning_language_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: CategoryService = Depends(get_category_service),
):
    params = validate(
        "learning_language_params", {"learningLanguageId": learning_language_id},
    )
    if isinstance(params, Failure):
        return respond(params, request=request)
    command = validate("create_category", await read_json_body(request))
    if isinstance(command, Failure):
        return respond(command, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.create_category(
            user_id.value, LearningLanguageId(params.learning_language_id), command,
        ),
        created,
        request,
    )


@router.patch("/categories/{category_id}")
async def update_category(
    category_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: CategoryService = Depends(get_category_service),
):
    """Rename a category."""
    params = validate("category_params", {"categoryId": category_id})
    if isinstance(params, Failure):
        return respond(params, request=request)
    command = validate("update_category", await read_json_body(request))
    if isinstance(command, Failure):
        return respond(command, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.update_category(
            user_id.value, CategoryId(params.category_id), command,
        ),
        request=request,
    )


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    service: CategoryService = Depends(get_category_service),
):
    """Delete a category together with its words."""
    params = validate("category_params", {"categoryId": category_id})
    if isinstance(params, Failure):
        return respond(params, request=request)
    user_id = await resolver.current_user_id()
    if isinstance(user_id, Failure):
        return respond(user_id, request=request)
    return respond(
        await service.delete_category(user_id.value, CategoryId(params.category_id)),
        request=request,
    )
