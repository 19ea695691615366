# src/domains/integrations/poweroffice_go/onboarding/routes.py
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import RedirectResponse

from .dependencies import get_onboarding_service
from .models import (
    CALLBACK_ROUTE,
    CONTROLLER_ROUTE,
    SESSION_TOKEN_QUERY_PARAM,
    OnboardingCallbackParams,
)
from .service import PowerOfficeGoOnboardingService

# Router for the PowerOfficeGo onboarding callback
router = APIRouter(prefix=f"/{CONTROLLER_ROUTE}", tags=["PowerOfficeGo Onboarding"])


@router.get(
    f"/{CALLBACK_ROUTE}",
    operation_id="powerOfficeGoOnboardingCallback",
)
async def authenticate(
    onboarding_status: str = Query(
        ..., alias="status", description="Onboarding status"
    ),
    token: Optional[str] = Query(None, description="PowerOfficeGo onboarding token"),
    onboarding_session_token: UUID = Query(
        ..., alias=SESSION_TOKEN_QUERY_PARAM, description="Onboarding session token"
    ),
    service: PowerOfficeGoOnboardingService = Depends(get_onboarding_service),
) -> RedirectResponse:
    """
    Handle the onboarding callback from PowerOfficeGo.

    **No authentication required** - the user's browser is redirected here by
    PowerOfficeGo

    **Redirect Behavior**:
    - Success: `{redirect_url}?clientKeys=..&clientNames=..&clientOrganizationNumbers=..&userEmail=..`
    - Error: `{redirect_url}?errorMessage={message}`

    Raises:
        HTTP 400: If the onboarding session token is unknown
        HTTP 500: If the onboarding api is not configured
        HTTP 502: If the request to PowerOfficeGo fails
    """
    callback_params = OnboardingCallbackParams(
        status=onboarding_status,
        token=token,
        onboarding_session_token=onboarding_session_token,
    )

    redirect_url = await service.finalize_onboarding(
        callback_params.onboarding_session_token,
        callback_params.token,
        callback_params.status,
    )
    return RedirectResponse(url=redirect_url, status_code=status.HTTP_302_FOUND)
