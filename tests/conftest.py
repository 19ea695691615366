"""
Global pytest configuration and fixtures for the onboarding API test suite.
"""

from typing import Generator
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from src.domains.integrations.poweroffice_go.client import (
    PowerOfficeGoApiResolver,
    PowerOfficeGoOnboardingApi,
)
from src.domains.integrations.poweroffice_go.onboarding.dependencies import (
    get_api_resolver,
    get_session_registry,
)
from src.domains.integrations.poweroffice_go.onboarding.service import (
    PowerOfficeGoOnboardingService,
)
from src.domains.integrations.poweroffice_go.onboarding.session_registry import (
    OnboardingSessionRegistry,
)
from src.main import app

# Import fixtures from fixture modules
from tests.fixtures.poweroffice_go_fixtures import *  # noqa: F403, F401


@pytest.fixture
def session_registry() -> OnboardingSessionRegistry:
    """Fresh session registry without expiry."""
    return OnboardingSessionRegistry()


@pytest.fixture
def mock_onboarding_api() -> Mock:
    """Mock PowerOfficeGo onboarding api client."""
    api = Mock(spec=PowerOfficeGoOnboardingApi)
    api.initiate = AsyncMock()
    api.finalize = AsyncMock()
    return api


@pytest.fixture
def mock_api_resolver(mock_onboarding_api: Mock) -> Mock:
    """Mock resolver that always resolves to mock_onboarding_api."""
    resolver = Mock(spec=PowerOfficeGoApiResolver)
    resolver.resolve = AsyncMock(return_value=mock_onboarding_api)
    return resolver


@pytest.fixture
def onboarding_service(
    session_registry: OnboardingSessionRegistry, mock_api_resolver: Mock
) -> PowerOfficeGoOnboardingService:
    """Onboarding service over a fresh registry and mocked api."""
    return PowerOfficeGoOnboardingService(session_registry, mock_api_resolver)


@pytest.fixture
def client(
    session_registry: OnboardingSessionRegistry, mock_api_resolver: Mock
) -> Generator[TestClient, None, None]:
    """FastAPI test client with onboarding dependencies overridden."""
    app.dependency_overrides[get_session_registry] = lambda: session_registry
    app.dependency_overrides[get_api_resolver] = lambda: mock_api_resolver
    yield TestClient(app)
    app.dependency_overrides.clear()
