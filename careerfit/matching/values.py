"""Work values associated with careers.

Uploaded records may list the values a career rewards explicitly
(``workValues``). When they don't, values are derived from the career's
RIASEC types and its work-environment tags.
"""

from __future__ import annotations

from careerfit.dataset.models import CareerRecord
from careerfit.matching.matchers import normalize_skill

RIASEC_VALUES: dict[str, tuple[str, ...]] = {
    "realistic": ("independence", "stability", "working-with-hands", "tangible-results"),
    "investigative": ("autonomy", "learning", "intellectual-challenge", "achievement"),
    "artistic": ("creativity", "self-expression", "autonomy", "variety"),
    "social": ("helping-others", "collaboration", "impact", "relationships"),
    "enterprising": ("leadership", "income", "recognition", "achievement"),
    "conventional": ("stability", "structure", "security", "work-life-balance"),
}

ENVIRONMENT_VALUES: dict[str, tuple[str, ...]] = {
    "remote-friendly": ("flexibility", "work-life-balance"),
    "freelance": ("flexibility", "independence"),
    "self-employed": ("independence", "autonomy"),
    "team-based": ("collaboration",),
    "fast-paced": ("variety", "challenge"),
    "structured": ("structure",),
    "academic": ("learning",),
    "laboratory": ("learning",),
    "travel": ("variety",),
    "one-on-one": ("helping-others",),
}


def normalize_value(value: str) -> str:
    """Normalize a work-value identifier ("Work-Life Balance" == "work life balance")."""
    return normalize_skill(value)


def career_value_tags(career: CareerRecord) -> tuple[str, ...]:
    """Return the normalized value tags a career rewards, without duplicates."""
    if career.work_values:
        sources: list[str] = list(career.work_values)
    else:
        sources = []
        for riasec_type in (career.primary_type, career.secondary_type):
            if riasec_type:
                sources.extend(RIASEC_VALUES.get(riasec_type, ()))
        for tag in career.work_environment:
            sources.extend(ENVIRONMENT_VALUES.get(normalize_value(tag).replace(" ", "-"), ()))

    tags: list[str] = []
    for value in sources:
        normalized = normalize_value(value)
        if normalized and normalized not in tags:
            tags.append(normalized)
    return tuple(tags)
