from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application URLs
    APP_BASE_URL: str = "http://localhost:8001"  # Default for development

    # PowerOfficeGo API configuration
    POWEROFFICE_GO_API_BASE_URL: str | None = "https://goapi.poweroffice.net/v2"
    POWEROFFICE_GO_TIMEOUT: int = 30

    # Onboarding sessions never expire unless a TTL is configured
    ONBOARDING_SESSION_TTL_SECONDS: int | None = Field(None, gt=0)

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


settings = Settings()
