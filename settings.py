# settings.py
"""
FitFlow API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from urllib.parse import urlparse, urlunparse


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Environment
    ENV: str = Field(default="development")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Redis (saved plans + theme)
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (redis://[:password@]host:port/db)"
    )
    REDIS_PASSWORD: Optional[str] = Field(
        default=None,
        description="Redis password for authentication"
    )
    REDIS_SOCKET_TIMEOUT: int = Field(
        default=5,
        description="Redis socket timeout in seconds"
    )
    SAVED_PLANS_KEY: str = "fitflow:saved-plans"
    THEME_KEY: str = "fitflow:theme"

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "development"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    # Plan engine
    EXERCISE_SHUFFLE_SEED: Optional[int] = Field(
        default=None,
        description="Seed for exercise selection; unset for fresh picks on every request"
    )
    DEFAULT_WORKOUT_DAYS: int = 3
    DEFAULT_MEALS_PER_DAY: int = 3

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def redis_url_with_auth(self) -> str:
        """Build Redis URL with authentication if password is provided."""
        if self.REDIS_PASSWORD:
            parsed = urlparse(self.REDIS_URL)
            netloc_with_auth = f":{self.REDIS_PASSWORD}@{parsed.netloc}"
            return urlunparse((
                parsed.scheme,
                netloc_with_auth,
                parsed.path,
                parsed.params,
                parsed.query,
                parsed.fragment
            ))
        return self.REDIS_URL


settings = Settings()
