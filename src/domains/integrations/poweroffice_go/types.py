"""PowerOfficeGo v2 API type definitions for type safety."""

from typing import List, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field


# PowerOfficeGo API Request Types
class InitiateOnboardingRequest(BaseModel):
    """Body of POST /Onboarding/Initiate."""

    ApplicationKey: UUID = Field(..., description="Integration application key")
    ClientOrganizationNumber: str = Field(
        ..., description="Organization number of the client to onboard"
    )
    RedirectUri: str = Field(
        ..., description="Callback url PowerOfficeGo redirects the user back to"
    )


class FinalizeOnboardingRequest(BaseModel):
    """Body of POST /Onboarding/Finalize."""

    OnboardingToken: Optional[str] = Field(
        None, description="Short-lived token received on the onboarding callback"
    )


# PowerOfficeGo API Response Types
class InitiateOnboardingResponse(BaseModel):
    """Response from POST /Onboarding/Initiate."""

    TemporaryUrl: str = Field(
        ..., description="Url the user must be redirected to for authorization"
    )


class OnboardedClientInformation(BaseModel):
    """A single client the user granted the integration access to."""

    ClientKey: Optional[str] = Field(None, description="PowerOfficeGo client key")
    ClientName: Optional[str] = Field(None, description="Client display name")
    ClientOrganizationNumber: Optional[str] = Field(
        None, description="Client organization number"
    )


class FinalizeOnboardingResponse(BaseModel):
    """Response from POST /Onboarding/Finalize."""

    OnboardedClientsInformation: Optional[List[OnboardedClientInformation]] = Field(
        None, description="Clients onboarded in this session"
    )
    UserEmail: Optional[str] = Field(None, description="Email of the authorizing user")


# Finalize exchange outcome
class FinalizeSuccess(BaseModel):
    """Finalize exchange completed with a parsed response."""

    kind: Literal["success"] = "success"
    response: FinalizeOnboardingResponse


class FinalizeFailure(BaseModel):
    """Finalize exchange answered with a non-success status code."""

    kind: Literal["failure"] = "failure"
    status_code: int = Field(..., description="HTTP status code from PowerOfficeGo")
    raw_content: str = Field("", description="Raw response body")


FinalizeResult = Union[FinalizeSuccess, FinalizeFailure]
