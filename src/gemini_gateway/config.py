"""
Configuration settings for the Gemini gateway.

All settings are loaded from environment variables. API_KEYS has no default.
Use .env file for local development (see .env.example).
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Gemini Gateway"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Gemini Endpoint ===
    API_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    MODEL_ID: str = "gemini-1.5-flash"
    REQUEST_TIMEOUT: float = 60.0  # seconds, per physical attempt

    # === Credentials ===
    # Order matters: the pool starts at index 0 and rotates forward.
    # Required: loading settings without at least one key fails immediately.
    API_KEYS: list[str] = Field(..., min_length=1)

    # === Failover ===
    RETRY_BACKOFF_SECONDS: float = 0.5  # Fixed pause after every failed attempt

    # === Generation Parameters ===
    CHAT_TEMPERATURE: float = 0.8
    CHAT_MAX_OUTPUT_TOKENS: int = 1000
    OUTLINE_TEMPERATURE: float = 0.5
    SYSTEM_INSTRUCTION: str = ""  # Supplied by the chat layer

    @property
    def generate_url(self) -> str:
        """Full generateContent URL for the configured model (no key)."""
        return f"{self.API_BASE_URL.rstrip('/')}/models/{self.MODEL_ID}:generateContent"


@lru_cache()
def get_settings() -> Settings:
    """
    Load settings once per process.

    Raises pydantic.ValidationError when the environment is misconfigured
    (e.g. no API_KEYS), so callers should load settings at startup.
    """
    return Settings()
