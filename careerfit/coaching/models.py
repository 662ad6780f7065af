"""Data models for LLM-generated coaching content."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CoachingQuestion(BaseModel):
    """A coaching question for an individual."""

    question: str
    category: str
    purpose: str
    follow_up: list[str] = Field(default_factory=list)


class ReflectionQuestion(BaseModel):
    """A reflection question a manager can use with a team member."""

    question: str
    context: str
    manager_guidance: str


class CareerSuggestion(BaseModel):
    """A career suggested by the LLM (separate from the deterministic ranking)."""

    title: str
    match: int = Field(..., ge=0, le=100)
    description: str
    key_activities: list[str] = Field(default_factory=list)
    development_areas: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)


class DevelopmentGoal(BaseModel):
    goal: str
    actions: list[str] = Field(default_factory=list)
    timeline: str = ""


class DevelopmentPlan(BaseModel):
    """Short- and long-term development plan."""

    short_term: list[DevelopmentGoal] = Field(default_factory=list)
    long_term: list[DevelopmentGoal] = Field(default_factory=list)
    skill_gaps: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.short_term or self.long_term or self.skill_gaps or self.resources)
