"""Configuration settings for the coaching text-generation service.

Holds the external LLM credentials and routing configured by the admin.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CoachingConfig(BaseSettings):
    """Configuration for LLM-backed coaching content.

    Settings can be overridden via environment variables prefixed with COACHING_.

    Example: COACHING_LLM_PROVIDER=anthropic
    """

    model_config = SettingsConfigDict(
        env_prefix="COACHING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    llm_provider: str = Field(
        default="openai",
        description="LLM provider (openai, anthropic, azure, etc.)",
    )
    llm_model: str = Field(
        default="gpt-4o-mini",
        description="LLM model name",
    )
    llm_api_key: str | None = Field(
        default=None,
        description="API key for LLM provider",
    )
    llm_base_url: str | None = Field(
        default=None,
        description="Base URL for OpenAI-compatible endpoints or a proxy",
    )
    llm_timeout: Annotated[float, Field(gt=0)] = Field(
        default=60.0,
        description="Timeout in seconds for LLM calls",
    )
    llm_max_retries: Annotated[int, Field(ge=0)] = Field(
        default=1,
        description="Maximum retry attempts for LLM calls",
    )
    llm_temperature: Annotated[float, Field(ge=0.0, le=2.0)] = Field(
        default=0.7,
        description="Sampling temperature",
    )
    llm_max_tokens: Annotated[int, Field(gt=0)] = Field(
        default=1500,
        description="Default completion token limit",
    )


# Singleton instance for easy import
_coaching_config: CoachingConfig | None = None


def get_coaching_config() -> CoachingConfig:
    """Get the coaching configuration singleton."""
    global _coaching_config
    if _coaching_config is None:
        _coaching_config = CoachingConfig()
    return _coaching_config


def reset_coaching_config() -> None:
    """Reset the coaching configuration singleton (useful for testing)."""
    global _coaching_config
    _coaching_config = None
