# src/domains/integrations/poweroffice_go/onboarding/dependencies.py
from fastapi import Depends

from src.core.settings import settings

from ..client import PowerOfficeGoApiResolver
from .service import PowerOfficeGoOnboardingService
from .session_registry import OnboardingSessionRegistry

# Process-wide session registry, shared by every request
session_registry = OnboardingSessionRegistry(
    ttl_seconds=settings.ONBOARDING_SESSION_TTL_SECONDS
)


def get_session_registry() -> OnboardingSessionRegistry:
    """Session registry dependency for FastAPI dependency injection."""
    return session_registry


def get_api_resolver() -> PowerOfficeGoApiResolver:
    return PowerOfficeGoApiResolver()


def get_onboarding_service(
    registry: OnboardingSessionRegistry = Depends(get_session_registry),
    api_resolver: PowerOfficeGoApiResolver = Depends(get_api_resolver),
) -> PowerOfficeGoOnboardingService:
    return PowerOfficeGoOnboardingService(registry, api_resolver)
