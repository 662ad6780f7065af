"""Configuration settings for career matching."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from careerfit.matching.models import WEIGHT_TOLERANCE, ScoringWeights


class MatchingConfig(BaseSettings):
    """Career matching configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `MATCHING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATCHING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Scoring weights (must sum to 1.0)
    weight_riasec: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.5,
        description="Weight for RIASEC affinity",
    )
    weight_skills: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.3,
        description="Weight for skill coverage",
    )
    weight_values: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.2,
        description="Weight for work-value alignment",
    )

    # Ranking
    top_n: Annotated[int, Field(gt=0)] = Field(
        default=6,
        description="Number of careers returned by default",
    )

    # Rubric constants
    secondary_type_weight: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.5,
        description="Weight of a career's secondary RIASEC type relative to its primary",
    )
    neutral_baseline: Annotated[float, Field(ge=0.0, le=100.0)] = Field(
        default=50.0,
        description="Sub-score used when there is no evidence either way",
    )

    # Skill matching
    skill_fuzzy_match: bool = Field(
        default=False,
        description="Credit a rating to the most similar skill when no exact or alias match exists",
    )
    skill_fuzzy_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.85,
        description="Similarity threshold for fuzzy matching",
    )

    @model_validator(mode="after")
    def validate_weights_sum_to_one(self) -> MatchingConfig:
        """Ensure scoring weights sum to 1.0 (within tolerance)."""
        weight_sum = self.weight_riasec + self.weight_skills + self.weight_values
        if abs(weight_sum - 1.0) > WEIGHT_TOLERANCE:
            raise ValueError(
                "Scoring weights must sum to 1.0. "
                f"Got {weight_sum:.6f} "
                f"(riasec={self.weight_riasec}, skills={self.weight_skills}, "
                f"values={self.weight_values})."
            )
        return self

    def weights(self) -> ScoringWeights:
        """Return the configured weights as a ScoringWeights value."""
        return ScoringWeights(
            riasec=self.weight_riasec,
            skills=self.weight_skills,
            values=self.weight_values,
        )


# Singleton instance for easy import
_matching_config: MatchingConfig | None = None


def get_matching_config() -> MatchingConfig:
    """Get the matching configuration singleton."""
    global _matching_config
    if _matching_config is None:
        _matching_config = MatchingConfig()
    return _matching_config


def reset_matching_config() -> None:
    """Reset the matching configuration singleton (useful for testing)."""
    global _matching_config
    _matching_config = None
