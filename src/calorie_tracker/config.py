"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_CATALOG_URL = (
    "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
    "calorias-QSxrClBsW93GhpQ8AyHQlIGxe5ioWA.json"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    catalog_url: str = DEFAULT_CATALOG_URL
    catalog_timeout_seconds: float = 15
    catalog_retry_attempts: int = 1
    catalog_retry_delay_seconds: float = 0.3
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
