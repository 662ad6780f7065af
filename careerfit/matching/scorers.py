"""Sub-score functions for career matching.

Each function returns a score on a 0-100 scale. Where the profile offers no
evidence for a component, the score is ``neutral_baseline`` rather than 0 so
that skipped detail under-differentiates careers instead of penalizing them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from careerfit.assessment.models import MAX_CONFIDENCE, MIN_CONFIDENCE, RIASECScore
from careerfit.dataset.models import CareerRecord
from careerfit.matching.matchers import find_skill_rating
from careerfit.matching.values import career_value_tags, normalize_value


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def normalized_riasec(scores: RIASECScore) -> dict[str, float]:
    """Scale each dimension against the user's strongest dimension (0-100).

    No fixed maximum is assumed; an all-zero profile maps to all zeros.
    """
    raw = scores.as_dict()
    peak = max(raw.values())
    if peak <= 0:
        return {dim: 0.0 for dim in raw}
    return {dim: _clamp(value / peak * 100.0) for dim, value in raw.items()}


def score_riasec_affinity(
    scores: RIASECScore,
    career: CareerRecord,
    *,
    secondary_weight: float = 0.5,
    neutral_baseline: float = 50.0,
) -> float:
    """Personality fit from the career's primary and secondary RIASEC types."""
    if career.primary_type is None:
        return neutral_baseline

    normalized = normalized_riasec(scores)
    primary = normalized[career.primary_type]
    if career.secondary_type is None or secondary_weight <= 0:
        return primary

    secondary = normalized[career.secondary_type]
    return _clamp((primary + secondary_weight * secondary) / (1.0 + secondary_weight))


def confidence_to_score(rating: float) -> float:
    """Map a 1-5 confidence rating onto 0-100."""
    span = MAX_CONFIDENCE - MIN_CONFIDENCE
    return _clamp((rating - MIN_CONFIDENCE) / span * 100.0)


def score_skill_coverage(
    skills_confidence: Mapping[str, int],
    career: CareerRecord,
    *,
    neutral_baseline: float = 50.0,
    fuzzy: bool = False,
    threshold: float = 0.85,
) -> tuple[float, dict[str, int], list[str]]:
    """Average confidence across the career's required skills.

    Each skill the user did not rate contributes ``neutral_baseline``, the
    same credit an empty confidence map earns (the default 50 is the
    midpoint of the 1-5 scale).

    Returns:
        score, matched skills (required skill -> rating), unrated skills
    """
    required = list(career.required_skills)
    if not required or not skills_confidence:
        return neutral_baseline, {}, required

    matched: dict[str, int] = {}
    unrated: list[str] = []
    total = 0.0
    for skill in required:
        rating = find_skill_rating(
            skill, skills_confidence, fuzzy=fuzzy, threshold=threshold
        )
        if rating is None:
            unrated.append(skill)
            total += neutral_baseline
        else:
            matched[skill] = rating
            total += confidence_to_score(rating)

    return _clamp(total / len(required)), matched, unrated


def rank_weight(position: int) -> float:
    """Weight of the user's value at 0-based rank ``position``."""
    return 1.0 / (position + 1)


def score_value_alignment(
    work_values: Sequence[str],
    career: CareerRecord,
    *,
    neutral_baseline: float = 50.0,
) -> tuple[float, list[str]]:
    """Rank-weighted overlap between the user's values and the career's.

    The score is the weight of matched user values divided by the best
    weight achievable with as many matches as the career has tags. Each
    career tag is credited once, to the highest-ranked value naming it.

    Returns:
        score, matched values (as the user wrote them, in rank order)
    """
    tags = set(career_value_tags(career))
    if not work_values or not tags:
        return neutral_baseline, []

    matched: list[str] = []
    credited: set[str] = set()
    earned = 0.0
    for position, value in enumerate(work_values):
        tag = normalize_value(value)
        if tag in tags and tag not in credited:
            credited.add(tag)
            matched.append(value)
            earned += rank_weight(position)

    best = sum(rank_weight(i) for i in range(min(len(work_values), len(tags))))
    return _clamp(earned / best * 100.0), matched
