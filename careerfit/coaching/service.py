"""Coaching content service.

Wraps a TextGenerator with prompt building and response parsing. Failures
of the backend surface as CoachingLLMError and stay separate from the
matching engine's errors.
"""

from __future__ import annotations

import logging

from careerfit.assessment.models import UserProfile
from careerfit.coaching.config import CoachingConfig, get_coaching_config
from careerfit.coaching.llm import CoachingLLM, TextGenerator
from careerfit.coaching.models import (
    CareerSuggestion,
    CoachingQuestion,
    DevelopmentPlan,
    ReflectionQuestion,
)
from careerfit.coaching.parsers import (
    parse_career_suggestions,
    parse_coaching_questions,
    parse_development_plan,
    parse_reflection_questions,
)
from careerfit.coaching.prompts import (
    CAREER_SYSTEM_PROMPT,
    COACHING_SYSTEM_PROMPT,
    DEVELOPMENT_SYSTEM_PROMPT,
    REFLECTION_SYSTEM_PROMPT,
    build_career_prompt,
    build_coaching_prompt,
    build_development_plan_prompt,
    build_reflection_prompt,
)

logger = logging.getLogger(__name__)

LONG_RESPONSE_TOKENS = 2000


class CoachingService:
    """Generates persona-specific coaching content for a completed profile."""

    def __init__(
        self,
        generator: TextGenerator | None = None,
        config: CoachingConfig | None = None,
    ) -> None:
        self.config = config or get_coaching_config()
        self._generator = generator

    @property
    def generator(self) -> TextGenerator:
        # Created lazily so that building the service never needs credentials.
        if self._generator is None:
            self._generator = CoachingLLM(config=self.config)
        return self._generator

    def _generate(self, *, prompt: str, system_prompt: str, max_tokens: int) -> str:
        return self.generator.generate(
            prompt=prompt, system_prompt=system_prompt, max_tokens=max_tokens
        )

    def generate_coaching_questions(self, profile: UserProfile) -> list[CoachingQuestion]:
        response = self._generate(
            prompt=build_coaching_prompt(profile),
            system_prompt=COACHING_SYSTEM_PROMPT,
            max_tokens=self.config.llm_max_tokens,
        )
        questions = parse_coaching_questions(response)
        logger.info("Parsed %d coaching question(s)", len(questions))
        return questions

    def generate_reflection_questions(
        self, profile: UserProfile
    ) -> list[ReflectionQuestion]:
        response = self._generate(
            prompt=build_reflection_prompt(profile),
            system_prompt=REFLECTION_SYSTEM_PROMPT,
            max_tokens=self.config.llm_max_tokens,
        )
        questions = parse_reflection_questions(response)
        logger.info("Parsed %d reflection question(s)", len(questions))
        return questions

    def generate_career_recommendations(
        self, profile: UserProfile
    ) -> list[CareerSuggestion]:
        response = self._generate(
            prompt=build_career_prompt(profile),
            system_prompt=CAREER_SYSTEM_PROMPT,
            max_tokens=max(self.config.llm_max_tokens, LONG_RESPONSE_TOKENS),
        )
        suggestions = parse_career_suggestions(response)
        logger.info("Parsed %d career suggestion(s)", len(suggestions))
        return suggestions

    def generate_development_plan(self, profile: UserProfile) -> DevelopmentPlan:
        response = self._generate(
            prompt=build_development_plan_prompt(profile),
            system_prompt=DEVELOPMENT_SYSTEM_PROMPT,
            max_tokens=max(self.config.llm_max_tokens, LONG_RESPONSE_TOKENS),
        )
        plan = parse_development_plan(response)
        if plan.is_empty():
            logger.warning("Development plan response could not be parsed")
        return plan
