"""Configuration settings for careerfit."""

from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatasetMode(str, Enum):
    """How an uploaded dataset combines with the built-in catalog."""

    EXTEND = "extend"
    REPLACE = "replace"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Reference dataset
    dataset_path: Path | None = Field(
        default=None,
        description="Uploaded career dataset (JSON or CSV) applied at startup",
    )
    dataset_mode: DatasetMode = Field(
        default=DatasetMode.EXTEND,
        description="'extend' overrides/extends the built-in catalog, 'replace' swaps it",
    )

    # Paths
    output_dir: Path = Field(
        default=Path("./artifacts"),
        description="Directory that relative --out report paths are written under",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("dataset_mode", mode="before")
    @classmethod
    def validate_dataset_mode(cls, v: str | DatasetMode) -> DatasetMode:
        """Convert string mode to DatasetMode enum."""
        if isinstance(v, DatasetMode):
            return v
        if isinstance(v, str):
            value = v.lower().strip()
            if value == "extend":
                return DatasetMode.EXTEND
            elif value == "replace":
                return DatasetMode.REPLACE
            else:
                raise ValueError(
                    f"Invalid dataset mode: {v}. Must be 'extend' or 'replace'"
                )
        raise ValueError(f"Invalid dataset mode type: {type(v)}")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


# Singleton instance for easy import
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
