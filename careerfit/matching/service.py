"""Career matching service implementation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from careerfit.assessment.aggregator import InvalidProfileError
from careerfit.assessment.models import RIASEC_DIMENSIONS, UserProfile
from careerfit.dataset.models import CareerRecord
from careerfit.dataset.repository import ReferenceDataset
from careerfit.matching.config import MatchingConfig, get_matching_config
from careerfit.matching.models import MatchBreakdown, MatchResult, ScoringWeights
from careerfit.matching.scorers import (
    score_riasec_affinity,
    score_skill_coverage,
    score_value_alignment,
)

logger = logging.getLogger(__name__)


def _coerce_weights(
    weights: ScoringWeights | Mapping[str, float] | None, default: ScoringWeights
) -> ScoringWeights:
    if weights is None:
        return default
    if isinstance(weights, ScoringWeights):
        return weights
    return ScoringWeights.model_validate(dict(weights))


def ensure_valid_profile(profile: UserProfile | Mapping[str, Any]) -> UserProfile:
    """Return a validated profile or raise InvalidProfileError.

    Mappings are validated into a UserProfile. Profiles built without
    validation (``model_construct``) are checked for all six RIASEC
    dimensions as well.
    """
    if not isinstance(profile, UserProfile):
        if not isinstance(profile, Mapping):
            raise InvalidProfileError(
                f"Profile must be a UserProfile or mapping (got {type(profile).__name__})"
            )
        try:
            profile = UserProfile.model_validate(dict(profile))
        except ValidationError as e:
            raise InvalidProfileError(f"Invalid profile: {e}", e) from e

    scores = getattr(profile, "riasec_scores", None)
    if scores is None:
        raise InvalidProfileError("Profile has no RIASEC scores")

    missing: list[str] = []
    for dim in RIASEC_DIMENSIONS:
        value = getattr(scores, dim, None)
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            missing.append(dim)
        elif value < 0:
            raise InvalidProfileError(f"RIASEC score for {dim!r} must be non-negative")
    if missing:
        raise InvalidProfileError(
            f"RIASEC scores missing dimension(s): {', '.join(missing)}"
        )
    return profile


class CareerMatcher:
    """Scores every career against a profile and ranks the results.

    Scoring is pure: every call reads one dataset snapshot and returns new
    result objects, so a matcher can be shared across sessions.
    """

    def __init__(
        self,
        dataset: ReferenceDataset | None = None,
        config: MatchingConfig | None = None,
    ) -> None:
        self.config = config or get_matching_config()
        self.dataset = dataset if dataset is not None else ReferenceDataset()

    def score_career(
        self,
        profile: UserProfile,
        career: CareerRecord,
        weights: ScoringWeights | None = None,
    ) -> MatchResult:
        """Compute the weighted match score for a single career."""
        weights = weights or self.config.weights()
        baseline = self.config.neutral_baseline

        riasec = score_riasec_affinity(
            profile.riasec_scores,
            career,
            secondary_weight=self.config.secondary_type_weight,
            neutral_baseline=baseline,
        )
        skills, matched_skills, unrated_skills = score_skill_coverage(
            profile.skills_confidence,
            career,
            neutral_baseline=baseline,
            fuzzy=self.config.skill_fuzzy_match,
            threshold=self.config.skill_fuzzy_threshold,
        )
        values, matched_values = score_value_alignment(
            profile.work_values, career, neutral_baseline=baseline
        )

        total = weights.riasec * riasec + weights.skills * skills + weights.values * values
        total = max(0.0, min(100.0, total))

        return MatchResult(
            career=career,
            total_score=total,
            breakdown=MatchBreakdown(
                riasec_affinity=riasec,
                skill_coverage=skills,
                value_alignment=values,
                matched_skills=matched_skills,
                unrated_skills=unrated_skills,
                matched_values=matched_values,
            ),
        )

    @staticmethod
    def rank(results: Iterable[MatchResult], top_n: int | None = None) -> list[MatchResult]:
        """Sort results into a strict total order and truncate to ``top_n``.

        Order: higher total score, then higher RIASEC affinity, then career id.
        """
        ranked = sorted(results, key=MatchResult.sort_key)
        if top_n is not None:
            ranked = ranked[: max(0, top_n)]
        return ranked

    def match(
        self,
        profile: UserProfile | Mapping[str, Any],
        weights: ScoringWeights | Mapping[str, float] | None = None,
        top_n: int | None = None,
        careers: Iterable[CareerRecord] | None = None,
    ) -> list[MatchResult]:
        """Rank careers for a completed profile.

        Args:
            profile: Completed profile (or a mapping to validate into one).
            weights: Optional override for the configured sub-score weights.
            top_n: Number of results to keep (defaults to config.top_n).
            careers: Records to score instead of the current dataset snapshot.

        Raises:
            InvalidProfileError: If the profile is structurally malformed.
        """
        profile = ensure_valid_profile(profile)
        resolved_weights = _coerce_weights(weights, self.config.weights())
        limit = self.config.top_n if top_n is None else top_n

        records = tuple(careers) if careers is not None else self.dataset.load()
        if not records:
            logger.debug("Dataset is empty; no careers to rank")
            return []

        results = [
            self.score_career(profile, career, resolved_weights) for career in records
        ]
        ranked = self.rank(results, limit)

        logger.debug(
            "Ranked %d career(s), returning %d (top=%s %.2f)",
            len(results),
            len(ranked),
            ranked[0].career_id if ranked else None,
            ranked[0].total_score if ranked else 0.0,
        )
        return ranked

    def format_results(self, results: list[MatchResult]) -> str:
        """Format ranked results into a human-readable summary."""
        if not results:
            return "No matching careers."

        lines: list[str] = []
        for position, result in enumerate(results, start=1):
            breakdown = result.breakdown
            lines.append(
                f"{position}. {result.career.title} ({result.career_id}) "
                f"- {result.match_score}%"
            )
            lines.append(
                "   "
                f"riasec={breakdown.riasec_affinity:.1f} "
                f"skills={breakdown.skill_coverage:.1f} "
                f"values={breakdown.value_alignment:.1f}"
            )
            if breakdown.matched_values:
                lines.append(f"   Shared values: {', '.join(breakdown.matched_values)}")
            if breakdown.unrated_skills:
                lines.append(f"   Unrated skills: {', '.join(breakdown.unrated_skills)}")
        return "\n".join(lines)
