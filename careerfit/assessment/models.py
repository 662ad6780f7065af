"""Data models for the assessment stages and the completed profile."""

from __future__ import annotations

import re
from enum import Enum
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

RiasecType = Literal[
    "realistic",
    "investigative",
    "artistic",
    "social",
    "enterprising",
    "conventional",
]

RIASEC_DIMENSIONS: tuple[str, ...] = (
    "realistic",
    "investigative",
    "artistic",
    "social",
    "enterprising",
    "conventional",
)

MIN_CONFIDENCE = 1
MAX_CONFIDENCE = 5

STAGE_RIASEC = "riasec"
STAGE_SKILLS = "skills"
STAGE_VALUES = "values"
ASSESSMENT_STAGES: tuple[str, ...] = (STAGE_RIASEC, STAGE_SKILLS, STAGE_VALUES)


class Persona(str, Enum):
    """Role lens that decides which results view consumes the profile."""

    INDIVIDUAL = "individual"
    COACH = "coach"
    MANAGER = "manager"


class RIASECScore(BaseModel):
    """Scores for the six RIASEC dimensions.

    All six dimensions are required. Values are usually on a 0-100 scale,
    but only their relative magnitude is used for matching.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    realistic: float = Field(..., ge=0.0)
    investigative: float = Field(..., ge=0.0)
    artistic: float = Field(..., ge=0.0)
    social: float = Field(..., ge=0.0)
    enterprising: float = Field(..., ge=0.0)
    conventional: float = Field(..., ge=0.0)

    def get(self, dimension: str) -> float:
        """Return the score for a dimension name."""
        if dimension not in RIASEC_DIMENSIONS:
            raise KeyError(dimension)
        return getattr(self, dimension)

    def as_dict(self) -> dict[str, float]:
        return {dim: getattr(self, dim) for dim in RIASEC_DIMENSIONS}

    def top_types(self, n: int = 3) -> list[tuple[str, float]]:
        """Return the ``n`` highest dimensions, ties kept in RIASEC order."""
        ordered = sorted(
            self.as_dict().items(),
            key=lambda item: (-item[1], RIASEC_DIMENSIONS.index(item[0])),
        )
        return ordered[:n]


_VALUE_SEPARATOR_RE = re.compile(r"[\s\-_/]+")


def work_value_key(value: str) -> str:
    """Comparison key: "Work-Life Balance" and "work life balance" are one value."""
    return _VALUE_SEPARATOR_RE.sub(" ", value.lower()).strip()


def normalize_work_values(values: object) -> tuple[str, ...]:
    """Strip, drop blanks and de-duplicate while keeping rank order.

    Duplicates are detected with :func:`work_value_key`; the first spelling wins.
    """
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]

    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:  # type: ignore[union-attr]
        item = str(value).strip()
        key = work_value_key(item)
        if not key or key in seen:
            continue
        seen.add(key)
        ordered.append(item)
    return tuple(ordered)


def validate_confidence_map(skills: dict[str, int]) -> dict[str, int]:
    """Validate skill ratings are integers in the 1-5 range."""
    cleaned: dict[str, int] = {}
    for skill, rating in skills.items():
        name = str(skill).strip()
        if not name:
            raise ValueError("Skill identifiers must be non-empty")
        if (
            isinstance(rating, bool)
            or not isinstance(rating, (int, float))
            or int(rating) != rating
        ):
            raise ValueError(f"Confidence for {name!r} must be an integer (got {rating!r})")
        if not (MIN_CONFIDENCE <= int(rating) <= MAX_CONFIDENCE):
            raise ValueError(
                f"Confidence for {name!r} must be between {MIN_CONFIDENCE} and "
                f"{MAX_CONFIDENCE} (got {rating})"
            )
        cleaned[name] = int(rating)
    return cleaned


class UserProfile(BaseModel):
    """Completed assessment profile handed to the matcher."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    persona: Persona = Field(default=Persona.INDIVIDUAL, description="Results lens")
    name: str = Field(default="", description="Display name (optional)")
    riasec_scores: RIASECScore = Field(
        ...,
        validation_alias=AliasChoices("riasec_scores", "riasecScores"),
        description="RIASEC personality scores",
    )
    skills_confidence: dict[str, int] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("skills_confidence", "skillsConfidence", "skills"),
        description="Skill identifier -> confidence rating (1-5)",
    )
    work_values: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("work_values", "workValues"),
        description="Work values, most important first",
    )
    completed_assessments: tuple[str, ...] = Field(
        default=ASSESSMENT_STAGES,
        validation_alias=AliasChoices("completed_assessments", "completedAssessments"),
        description="Assessment stages that produced this profile",
    )

    @field_validator("skills_confidence", mode="before")
    @classmethod
    def validate_skills_confidence(cls, v: object) -> dict[str, int]:
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("skills_confidence must be a mapping of skill -> rating")
        return validate_confidence_map(v)

    @field_validator("work_values", mode="before")
    @classmethod
    def validate_work_values(cls, v: object) -> tuple[str, ...]:
        return normalize_work_values(v)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> UserProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)
