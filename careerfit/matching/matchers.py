"""Skill identifier matching utilities for career matching."""

from __future__ import annotations

import re
from collections.abc import Mapping
from difflib import SequenceMatcher

_SKILL_ALIASES: dict[str, str] = {
    "data analytics": "data analysis",
    "analytics": "data analysis",
    "coding": "programming",
    "software development": "programming",
    "maths": "mathematics",
    "math": "mathematics",
    "stats": "statistics",
    "public speaking": "communication",
    "listening": "active listening",
    "team work": "teamwork",
    "collaboration": "teamwork",
    "organisation": "organization",
    "creative thinking": "creativity",
    "ux design": "design",
    "graphic design": "design",
}


def normalize_skill(skill: str) -> str:
    """Normalize a skill identifier for comparison.

    Lowercases, drops parenthesized qualifiers, and treats hyphens,
    underscores and repeated whitespace as a single space, so
    "Data-Analysis" and "data_analysis" compare equal. Characters such as
    "+", "#" and "." are kept (e.g. "C++", "C#").
    """
    value = skill.strip().lower()
    value = re.sub(r"\([^)]*\)", "", value)
    value = re.sub(r"[-_/]+", " ", value)
    value = re.sub(r"\s+", " ", value)
    return value.strip(" ,;")


def canonicalize_skill(skill: str) -> str:
    normalized = normalize_skill(skill)
    return _SKILL_ALIASES.get(normalized, normalized)


def find_skill_rating(
    required: str,
    ratings: Mapping[str, int],
    fuzzy: bool = False,
    threshold: float = 0.85,
) -> int | None:
    """Return the user's rating for a required skill, or None if unrated.

    Skills match when their canonical forms (normalized, aliases applied)
    are equal. With ``fuzzy`` enabled, a required skill without a canonical
    match falls back to the most similar rated skill at or above
    ``threshold``, ties broken by skill name. Fuzzy matching is opt-in: near
    spellings such as "writing" and "wiring" are different skills.
    """
    if not ratings:
        return None

    target = canonicalize_skill(required)
    canonical_ratings: dict[str, int] = {}
    for name in sorted(ratings):
        canonical_ratings.setdefault(canonicalize_skill(name), ratings[name])

    if target in canonical_ratings:
        return canonical_ratings[target]

    if not fuzzy or threshold > 1.0:
        return None

    best: tuple[float, str] | None = None
    for candidate in canonical_ratings:
        similarity = SequenceMatcher(None, target, candidate).ratio()
        if similarity < threshold:
            continue
        if best is None or (-similarity, candidate) < (-best[0], best[1]):
            best = (similarity, candidate)

    if best is None:
        return None
    return canonical_ratings[best[1]]
