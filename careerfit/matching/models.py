"""Data models for career matching."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from careerfit.dataset.models import CareerRecord

WEIGHT_TOLERANCE = 1e-6


class ScoringWeights(BaseModel):
    """Weights of the three sub-scores; they must sum to 1.0."""

    model_config = ConfigDict(frozen=True)

    riasec: Annotated[float, Field(ge=0.0, le=1.0)] = 0.5
    skills: Annotated[float, Field(ge=0.0, le=1.0)] = 0.3
    values: Annotated[float, Field(ge=0.0, le=1.0)] = 0.2

    @model_validator(mode="after")
    def validate_sum(self) -> ScoringWeights:
        total = self.riasec + self.skills + self.values
        if abs(total - 1.0) > WEIGHT_TOLERANCE:
            raise ValueError(
                f"Scoring weights must sum to 1.0 (got {total:.6f}: riasec={self.riasec}, "
                f"skills={self.skills}, values={self.values})"
            )
        return self


@dataclass(frozen=True)
class MatchBreakdown:
    """Sub-scores (0-100) and the evidence behind them."""

    riasec_affinity: float
    skill_coverage: float
    value_alignment: float
    matched_skills: dict[str, int] = field(default_factory=dict)
    unrated_skills: list[str] = field(default_factory=list)
    matched_values: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        for name in ("riasec_affinity", "skill_coverage", "value_alignment"):
            value = getattr(self, name)
            if not (0.0 <= value <= 100.0):
                raise ValueError(f"{name} must be between 0 and 100 (got {value})")


@dataclass(frozen=True)
class MatchResult:
    """A career paired with its computed match score."""

    career: CareerRecord
    total_score: float
    breakdown: MatchBreakdown

    def __post_init__(self) -> None:
        if not (0.0 <= self.total_score <= 100.0):
            raise ValueError(f"total_score must be between 0 and 100 (got {self.total_score})")

    @property
    def career_id(self) -> str:
        return self.career.id

    @property
    def match_score(self) -> int:
        """Whole-number score shown to users."""
        return int(round(self.total_score))

    def sort_key(self) -> tuple[float, float, str]:
        """Descending score, then descending RIASEC affinity, then id."""
        return (-self.total_score, -self.breakdown.riasec_affinity, self.career.id)

    def to_dict(self) -> dict:
        return {
            "career_id": self.career.id,
            "title": self.career.title,
            "match_score": self.match_score,
            "total_score": round(self.total_score, 4),
            "riasec_affinity": round(self.breakdown.riasec_affinity, 4),
            "skill_coverage": round(self.breakdown.skill_coverage, 4),
            "value_alignment": round(self.breakdown.value_alignment, 4),
            "matched_skills": dict(self.breakdown.matched_skills),
            "unrated_skills": list(self.breakdown.unrated_skills),
            "matched_values": list(self.breakdown.matched_values),
            "career": self.career.to_dict(),
        }
