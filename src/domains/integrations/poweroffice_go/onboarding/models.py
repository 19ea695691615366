# src/domains/integrations/poweroffice_go/onboarding/models.py
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

# Callback endpoint, shared by the router and the callback url builder.
# Non-localhost deployments must have <api_base_url>/PowerOfficeGoOnboarding/authenticate
# whitelisted by PowerOfficeGo (go-api@poweroffice.no).
CONTROLLER_ROUTE = "PowerOfficeGoOnboarding"
CALLBACK_ROUTE = "authenticate"
SESSION_TOKEN_QUERY_PARAM = "onboardingSessionToken"


class OnboardingStatus(str, Enum):
    """Status reported by PowerOfficeGo on the onboarding callback."""

    SUCCESS = "Success"
    CANCELED = "Canceled"
    CLIENT_NOT_FOUND = "ClientNotFound"
    NO_CLIENT_ACCESS = "NoClientAccess"
    INTEGRATION_BLOCKED = "IntegrationBlocked"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["OnboardingStatus"]:
        """Exact, case-sensitive lookup; None for anything unrecognized."""
        try:
            return cls(raw)
        except ValueError:
            return None


class OnboardingSession(BaseModel):
    """An in-flight onboarding attempt, owned by the session registry."""

    model_config = ConfigDict(frozen=True)

    subscription_key: str = Field(
        ..., description="Subscription key used when finalizing"
    )
    return_redirect_url: str = Field(
        ..., description="Url the user is sent to when onboarding completes"
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the session was created",
    )


class OnboardingCallbackParams(BaseModel):
    """Query parameters from the PowerOfficeGo onboarding callback."""

    status: str = Field(..., description="Onboarding status")
    token: Optional[str] = Field(None, description="Onboarding token")
    onboarding_session_token: UUID = Field(..., description="Correlation token")
