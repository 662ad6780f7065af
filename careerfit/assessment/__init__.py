"""Assessment stages and completed profiles.

Public API:
    - AssessmentAggregator: Records the three stages and finalizes a profile
    - ProfileService: Load and validate completed profiles from disk
    - UserProfile / RIASECScore / Persona: Profile models
    - IncompleteProfileError / InvalidProfileError: Profile errors
"""

from careerfit.assessment.aggregator import (
    AssessmentAggregator,
    IncompleteProfileError,
    InvalidProfileError,
)
from careerfit.assessment.models import (
    ASSESSMENT_STAGES,
    RIASEC_DIMENSIONS,
    Persona,
    RIASECScore,
    RiasecType,
    UserProfile,
)
from careerfit.assessment.profile import ProfileService

__all__ = [
    "AssessmentAggregator",
    "IncompleteProfileError",
    "InvalidProfileError",
    "ProfileService",
    "UserProfile",
    "RIASECScore",
    "RiasecType",
    "Persona",
    "RIASEC_DIMENSIONS",
    "ASSESSMENT_STAGES",
]
