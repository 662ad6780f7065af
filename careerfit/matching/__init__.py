"""Career matching engine.

This module ranks careers for a completed assessment profile by combining
RIASEC affinity, skill coverage and work-value alignment.

Public API:
    - CareerMatcher: Scoring and ranking service
    - MatchResult / MatchBreakdown: Ranked output with explainable sub-scores
    - ScoringWeights: Sub-score weight override
    - MatchingConfig: Configuration settings
"""

from careerfit.matching.config import (
    MatchingConfig,
    get_matching_config,
    reset_matching_config,
)
from careerfit.matching.models import MatchBreakdown, MatchResult, ScoringWeights
from careerfit.matching.service import CareerMatcher, ensure_valid_profile

__all__ = [
    "CareerMatcher",
    "MatchResult",
    "MatchBreakdown",
    "ScoringWeights",
    "MatchingConfig",
    "ensure_valid_profile",
    "get_matching_config",
    "reset_matching_config",
]
