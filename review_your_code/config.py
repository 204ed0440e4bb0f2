"""
Configuration module for ReviewYourCode.

Uses pydantic-settings for configuration management with environment variables.
"""

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GEMINI_KEY_PLACEHOLDER = "your_gemini_api_key_here"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Gemini Configuration
    gemini_api_key: str = Field(
        default="",
        description="Gemini API key, sent as the `key` query parameter",
    )
    gemini_model: str = Field(
        default="gemini-1.5-flash",
        description="Gemini model used for generateContent calls",
    )
    gemini_api_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Gemini API base URL",
    )
    gemini_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    gemini_top_k: int = Field(
        default=40,
        ge=1,
        description="Top-k sampling parameter",
    )
    gemini_top_p: float = Field(
        default=0.95,
        ge=0.0,
        le=1.0,
        description="Top-p (nucleus) sampling parameter",
    )
    review_max_output_tokens: int = Field(
        default=2048,
        ge=1,
        description="Maximum output tokens for code reviews",
    )
    generate_max_output_tokens: int = Field(
        default=4096,
        ge=1,
        description="Maximum output tokens for code generation (full source files)",
    )
    gemini_json_mode: bool = Field(
        default=False,
        description="Ask Gemini for an application/json response",
    )
    gemini_timeout: Optional[float] = Field(
        default=None,
        gt=0.0,
        description="Client timeout in seconds; None waits for the reply",
    )

    # Application Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Server Configuration
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def is_gemini_configured(self) -> bool:
        """Check if the Gemini credential is set."""
        return bool(self.gemini_api_key and self.gemini_api_key != GEMINI_KEY_PLACEHOLDER)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()


def read_gemini_api_key() -> str:
    """
    Read the Gemini credential from the environment and .env, bypassing the cache.

    Returns:
        str: The configured key, empty when unset.
    """
    return Settings().gemini_api_key


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Configure application logging.

    Args:
        settings: Optional settings instance. If not provided, uses cached settings.

    Returns:
        logging.Logger: Configured logger instance.
    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("review_your_code")
    logger.setLevel(getattr(logging, settings.log_level))

    return logger
