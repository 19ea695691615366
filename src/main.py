import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.settings import settings
from src.domains.integrations.poweroffice_go.onboarding.routes import (
    router as poweroffice_go_onboarding_router,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="PowerOfficeGo Onboarding API",
    description="Client onboarding flow for the PowerOfficeGo integration",
    version="0.1.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# The onboarding callback is mounted at the root so that its url is
# <APP_BASE_URL>/PowerOfficeGoOnboarding/authenticate
app.include_router(poweroffice_go_onboarding_router)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "PowerOfficeGo Onboarding API is running"}


@app.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}
