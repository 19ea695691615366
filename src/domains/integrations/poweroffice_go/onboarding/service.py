# src/domains/integrations/poweroffice_go/onboarding/service.py
import logging
from typing import Optional
from urllib.parse import quote_plus
from uuid import UUID

from src.core.settings import settings
from src.shared.exceptions import ApiResolutionError

from ..client import (
    ONBOARDING_API,
    PowerOfficeGoApiResolver,
    PowerOfficeGoOnboardingApi,
)
from ..types import (
    FinalizeOnboardingResponse,
    FinalizeSuccess,
    InitiateOnboardingResponse,
)
from .models import (
    CALLBACK_ROUTE,
    CONTROLLER_ROUTE,
    SESSION_TOKEN_QUERY_PARAM,
    OnboardingStatus,
)
from .session_registry import OnboardingSessionRegistry

logger = logging.getLogger(__name__)


class PowerOfficeGoOnboardingService:
    """Service for onboarding new clients to the PowerOfficeGo integration."""

    def __init__(
        self,
        registry: OnboardingSessionRegistry,
        api_resolver: PowerOfficeGoApiResolver,
    ):
        self.registry = registry
        self.api_resolver = api_resolver

    async def begin_onboarding(
        self,
        application_key: UUID,
        subscription_key: str,
        client_org_number: str,
        api_base_url: Optional[str],
        on_complete_redirect_url: str,
    ) -> InitiateOnboardingResponse:
        """
        Initiate an onboarding session for the provided client org number.

        The caller must redirect the user to the TemporaryUrl of the returned
        response. To use anything other than localhost-based urls, the callback
        url <api_base_url>/PowerOfficeGoOnboarding/authenticate has to be
        whitelisted by the PowerOfficeGo team (go-api@poweroffice.no).

        Args:
            application_key: Integration application key
            subscription_key: Integration subscription key
            client_org_number: Organization number of the client to onboard
            api_base_url: Public base url of this API, defaults to APP_BASE_URL
            on_complete_redirect_url: Url the user is sent to when onboarding
                succeeds or fails. On error the errorMessage query parameter is
                set. On success clientKeys, clientNames,
                clientOrganizationNumbers and userEmail are set; all but
                userEmail are comma separated lists when several clients were
                onboarded.

        Returns:
            InitiateOnboardingResponse from PowerOfficeGo, unmodified

        Raises:
            ApiResolutionError: If no onboarding api can be resolved
            DownstreamExchangeError: If the initiate request fails
        """
        api = await self._get_api_or_raise(subscription_key)
        base_url = (api_base_url or settings.APP_BASE_URL).rstrip("/")
        session_token = self.registry.create(subscription_key, on_complete_redirect_url)

        callback_url = (
            f"{base_url}/{CONTROLLER_ROUTE}/{CALLBACK_ROUTE}"
            f"?{SESSION_TOKEN_QUERY_PARAM}={session_token}"
        )

        logger.info(
            f"Initiating PowerOfficeGo onboarding for client {client_org_number} "
            f"with session {session_token}"
        )
        return await api.initiate(application_key, client_org_number, callback_url)

    async def finalize_onboarding(
        self,
        onboarding_session_token: UUID,
        onboarding_token: Optional[str],
        onboarding_status: str,
    ) -> str:
        """
        Complete an onboarding session from the PowerOfficeGo callback.

        Returns:
            The url to redirect the user to, carrying either the onboarded
            client details or an errorMessage

        Raises:
            UnknownSessionError: If the session token is unknown
            ApiResolutionError: If no onboarding api can be resolved
            DownstreamExchangeError: If the finalize request fails
        """
        session = self.registry.consume(onboarding_session_token)

        status = OnboardingStatus.parse(onboarding_status)
        if status is None:
            logger.warning(f"Unexpected onboarding status: {onboarding_status}")
            return error_redirect_url(
                session.return_redirect_url,
                "Unexpected onboarding status received from PowerOfficeGo: "
                f"{onboarding_status}",
            )

        if status is not OnboardingStatus.SUCCESS:
            logger.warning(f"Onboarding failure status: {status.value}")
            return error_redirect_url(
                session.return_redirect_url,
                f"Failure status received from PowerOfficeGo: {status.value}",
            )

        api = await self._get_api_or_raise(session.subscription_key)
        result = await api.finalize(onboarding_token)

        if isinstance(result, FinalizeSuccess):
            logger.info(
                f"Onboarded {len(result.response.OnboardedClientsInformation or [])} "
                f"clients for session {onboarding_session_token}"
            )
            return success_redirect_url(session.return_redirect_url, result.response)

        logger.warning(
            f"Finalizing onboarding failed with status {result.status_code}"
        )
        return error_redirect_url(
            session.return_redirect_url,
            "Failure while finalizing onboarding: "
            f"{result.status_code}: {result.raw_content}",
        )

    async def _get_api_or_raise(
        self, subscription_key: str
    ) -> PowerOfficeGoOnboardingApi:
        api = await self.api_resolver.resolve(ONBOARDING_API, subscription_key)
        if api is None:
            raise ApiResolutionError()

        return api


def with_query_separator(url: str) -> str:
    """Append '&' if the url already has a query string, otherwise '?'."""
    return f"{url}&" if "?" in url else f"{url}?"


def error_redirect_url(base_url: str, error_message: str) -> str:
    return f"{with_query_separator(base_url)}errorMessage={quote_plus(error_message)}"


def success_redirect_url(base_url: str, response: FinalizeOnboardingResponse) -> str:
    clients = response.OnboardedClientsInformation or []
    client_keys = ",".join(client.ClientKey or "" for client in clients)
    client_names = ",".join(client.ClientName or "" for client in clients)
    org_numbers = ",".join(client.ClientOrganizationNumber or "" for client in clients)
    user_email = response.UserEmail or ""

    return (
        f"{with_query_separator(base_url)}"
        f"clientKeys={client_keys}&"
        f"clientNames={quote_plus(client_names)}&"
        f"clientOrganizationNumbers={org_numbers}&"
        f"userEmail={quote_plus(user_email, safe='@')}"
    )
