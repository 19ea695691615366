# src/domains/integrations/poweroffice_go/client.py
import logging
from typing import Optional
from uuid import UUID

import httpx

from src.core.settings import settings
from src.shared.exceptions import DownstreamExchangeError

from .types import (
    FinalizeFailure,
    FinalizeOnboardingRequest,
    FinalizeOnboardingResponse,
    FinalizeResult,
    FinalizeSuccess,
    InitiateOnboardingRequest,
    InitiateOnboardingResponse,
)

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"

# Application type hint for the onboarding endpoints
ONBOARDING_API = "onboarding"


class PowerOfficeGoOnboardingApi:
    """Client for the PowerOfficeGo v2 onboarding endpoints."""

    def __init__(
        self,
        base_url: str,
        subscription_key: str,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.subscription_key = subscription_key
        self.timeout = timeout
        self.transport = transport

        self.initiate_url = f"{self.base_url}/Onboarding/Initiate"
        self.finalize_url = f"{self.base_url}/Onboarding/Finalize"

    async def initiate(
        self, application_key: UUID, client_org_number: str, redirect_uri: str
    ) -> InitiateOnboardingResponse:
        """
        Start an onboarding session in PowerOfficeGo.

        Args:
            application_key: Integration application key
            client_org_number: Organization number of the client to onboard
            redirect_uri: Callback url the user is sent back to

        Returns:
            InitiateOnboardingResponse with the url to redirect the user to

        Raises:
            DownstreamExchangeError: If the request fails or is rejected
        """
        body = InitiateOnboardingRequest(
            ApplicationKey=application_key,
            ClientOrganizationNumber=client_org_number,
            RedirectUri=redirect_uri,
        )

        async with self._client() as client:
            try:
                response = await client.post(
                    self.initiate_url, json=body.model_dump(mode="json")
                )
                response.raise_for_status()
                return InitiateOnboardingResponse(**response.json())
            except httpx.HTTPStatusError as e:
                logger.warning(
                    f"Onboarding initiate rejected with status "
                    f"{e.response.status_code}"
                )
                raise DownstreamExchangeError(
                    f"Failure while initiating onboarding: "
                    f"{e.response.status_code}: {e.response.text}"
                )
            except httpx.RequestError as e:
                logger.error(f"Onboarding initiate request failed: {e}")
                raise DownstreamExchangeError(
                    f"Onboarding initiate request failed: {e}"
                )
            except ValueError as e:
                logger.warning(f"Unexpected onboarding initiate response: {e}")
                raise DownstreamExchangeError(
                    f"Unexpected onboarding initiate response: {e}"
                )

    async def finalize(self, onboarding_token: Optional[str]) -> FinalizeResult:
        """
        Exchange the callback onboarding token for the onboarded clients.

        A non-success status code is returned as FinalizeFailure, carrying the
        status code and raw body, so the caller can route the user back with
        an explanation.

        Raises:
            DownstreamExchangeError: If the request itself fails
        """
        body = FinalizeOnboardingRequest(OnboardingToken=onboarding_token)

        async with self._client() as client:
            try:
                response = await client.post(
                    self.finalize_url, json=body.model_dump(mode="json")
                )
            except httpx.RequestError as e:
                logger.error(f"Onboarding finalize request failed: {e}")
                raise DownstreamExchangeError(
                    f"Onboarding finalize request failed: {e}"
                )

        if not response.is_success:
            return FinalizeFailure(
                status_code=response.status_code, raw_content=response.text
            )

        try:
            return FinalizeSuccess(
                response=FinalizeOnboardingResponse(**response.json())
            )
        except ValueError as e:
            logger.warning(f"Unexpected onboarding finalize response: {e}")
            return FinalizeFailure(
                status_code=response.status_code, raw_content=response.text
            )

    def _client(self) -> httpx.AsyncClient:
        headers = {
            SUBSCRIPTION_KEY_HEADER: self.subscription_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        return httpx.AsyncClient(
            headers=headers, timeout=self.timeout, transport=self.transport
        )


class PowerOfficeGoApiResolver:
    """Builds PowerOfficeGo API clients bound to a subscription key."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (
            base_url if base_url is not None else settings.POWEROFFICE_GO_API_BASE_URL
        )
        self.timeout = timeout if timeout is not None else settings.POWEROFFICE_GO_TIMEOUT
        self.transport = transport

    async def resolve(
        self, application_type_hint: Optional[str], subscription_key: str
    ) -> Optional[PowerOfficeGoOnboardingApi]:
        """Return an onboarding client, or None if one cannot be built."""
        if application_type_hint not in (None, ONBOARDING_API):
            logger.warning(f"Unsupported PowerOfficeGo api: {application_type_hint}")
            return None

        if not self.base_url:
            logger.warning("PowerOfficeGo api base url is not configured")
            return None

        if not subscription_key or not subscription_key.strip():
            return None

        return PowerOfficeGoOnboardingApi(
            base_url=self.base_url,
            subscription_key=subscription_key,
            timeout=self.timeout,
            transport=self.transport,
        )
