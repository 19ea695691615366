"""PowerOfficeGo client onboarding.

Begin/finalize flow for authorizing the integration's access to a client in
PowerOfficeGo, correlated through single-use onboarding session tokens.
"""

from .service import PowerOfficeGoOnboardingService
from .session_registry import OnboardingSessionRegistry

__all__ = ["OnboardingSessionRegistry", "PowerOfficeGoOnboardingService"]
