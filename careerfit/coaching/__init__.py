"""LLM-generated coaching content.

Public API:
    - CoachingService: Coaching questions, reflection questions, career
      suggestions and development plans
    - TextGenerator: Backend protocol; CoachingLLM is the LiteLLM backend
    - CoachingLLMError: Raised when generation fails
    - CoachingConfig: LLM credentials and routing
"""

from careerfit.coaching.config import (
    CoachingConfig,
    get_coaching_config,
    reset_coaching_config,
)
from careerfit.coaching.llm import CoachingLLM, CoachingLLMError, TextGenerator
from careerfit.coaching.models import (
    CareerSuggestion,
    CoachingQuestion,
    DevelopmentGoal,
    DevelopmentPlan,
    ReflectionQuestion,
)
from careerfit.coaching.service import CoachingService

__all__ = [
    "CoachingService",
    "CoachingLLM",
    "CoachingLLMError",
    "TextGenerator",
    "CoachingConfig",
    "get_coaching_config",
    "reset_coaching_config",
    "CoachingQuestion",
    "ReflectionQuestion",
    "CareerSuggestion",
    "DevelopmentGoal",
    "DevelopmentPlan",
]
