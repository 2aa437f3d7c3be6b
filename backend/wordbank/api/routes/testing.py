"""Testing Routes — test-data reset for end-to-end suites.

Invariants:
    - Never mounted when ENVIRONMENT=production (see main.create_app)
    - Where mounted, the admin gate still requires ENVIRONMENT=test AND the token
    - Wrong environment and wrong token are indistinguishable to the caller (403)
"""

from fastapi import APIRouter, Depends, Request, status

from wordbank.api.dependencies import get_testing_reset_service, read_json_body
from wordbank.api.responses import respond
from wordbank.config import Settings, get_settings
from wordbank.core.errors import Failure
from wordbank.schemas.validate import validate
from wordbank.services.testing_reset_service import TestingResetService

router = APIRouter(prefix="/api/v1/testing", tags=["testing"])


@router.post("/reset", status_code=status.HTTP_204_NO_CONTENT)
async def reset_test_data(
    request: Request,
    settings: Settings = Depends(get_settings),
    service: TestingResetService = Depends(get_testing_reset_service),
):
    """Wipe all application data and reseed the language catalog."""
    command = validate("test_reset", await read_json_body(request))
    if isinstance(command, Failure):
        return respond(command, request=request)
    return respond(
        await service.reset_database(
            command, settings.environment, settings.test_admin_token,
        ),
        request=request,
    )
