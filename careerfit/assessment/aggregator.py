"""Assemble a completed UserProfile from independently recorded stages."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from pydantic import ValidationError

from careerfit.assessment.models import (
    ASSESSMENT_STAGES,
    STAGE_RIASEC,
    STAGE_SKILLS,
    STAGE_VALUES,
    Persona,
    RIASECScore,
    UserProfile,
    normalize_work_values,
    validate_confidence_map,
)

logger = logging.getLogger(__name__)


class IncompleteProfileError(Exception):
    """Raised when a profile is finalized before every stage was recorded."""

    def __init__(self, missing_stages: list[str]):
        super().__init__(
            "Assessment is incomplete; missing stage(s): " + ", ".join(missing_stages)
        )
        self.missing_stages = missing_stages


class InvalidProfileError(Exception):
    """Raised when a profile or stage result is structurally malformed."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class AssessmentAggregator:
    """Collects the three assessment stages and finalizes them once.

    Each ``record_*`` call replaces the previous value for that stage.
    Stage values are validated and frozen when recorded, so the profile
    built by :meth:`finalize` never shares mutable state with the caller.
    """

    def __init__(self, persona: Persona | str = Persona.INDIVIDUAL, name: str = "") -> None:
        self.persona = Persona(persona)
        self.name = name
        self._riasec: RIASECScore | None = None
        self._skills: dict[str, int] | None = None
        self._values: tuple[str, ...] | None = None

    def record_riasec(self, scores: RIASECScore | Mapping[str, float]) -> RIASECScore:
        """Store the RIASEC stage result."""
        if isinstance(scores, RIASECScore):
            self._riasec = scores
        else:
            try:
                self._riasec = RIASECScore.model_validate(dict(scores))
            except ValidationError as e:
                raise InvalidProfileError(f"Invalid RIASEC scores: {e}", e) from e
        return self._riasec

    def record_skills(self, skills: Mapping[str, int]) -> dict[str, int]:
        """Store the skills stage result (skill -> confidence 1-5)."""
        try:
            self._skills = validate_confidence_map(dict(skills))
        except ValueError as e:
            raise InvalidProfileError(f"Invalid skill ratings: {e}", e) from e
        return dict(self._skills)

    def record_values(self, values: Iterable[str]) -> tuple[str, ...]:
        """Store the work-values stage result, most important first."""
        self._values = normalize_work_values(values)
        return self._values

    @property
    def completed_stages(self) -> list[str]:
        recorded = {
            STAGE_RIASEC: self._riasec is not None,
            STAGE_SKILLS: self._skills is not None,
            STAGE_VALUES: self._values is not None,
        }
        return [stage for stage in ASSESSMENT_STAGES if recorded[stage]]

    @property
    def missing_stages(self) -> list[str]:
        completed = set(self.completed_stages)
        return [stage for stage in ASSESSMENT_STAGES if stage not in completed]

    def is_complete(self) -> bool:
        return not self.missing_stages

    def finalize(self) -> UserProfile:
        """Build the immutable profile and reset the recorded stages.

        Raises:
            IncompleteProfileError: If any stage has not been recorded.
        """
        missing = self.missing_stages
        if missing:
            raise IncompleteProfileError(missing)

        profile = UserProfile(
            persona=self.persona,
            name=self.name,
            riasec_scores=self._riasec,
            skills_confidence=dict(self._skills or {}),
            work_values=self._values,
            completed_assessments=ASSESSMENT_STAGES,
        )
        logger.debug(
            "Finalized %s profile: %d rated skill(s), %d value(s)",
            profile.persona.value,
            len(profile.skills_confidence),
            len(profile.work_values),
        )
        self.reset()
        return profile

    def reset(self) -> None:
        """Discard every recorded stage."""
        self._riasec = None
        self._skills = None
        self._values = None
