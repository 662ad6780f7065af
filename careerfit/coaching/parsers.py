"""Best-effort parsers for semi-structured LLM output.

Each parser splits the response into sections by its leading marker and
keeps only the sections carrying every required field. Malformed sections
are dropped, never raised.
"""

from __future__ import annotations

import re

from pydantic import ValidationError

from careerfit.coaching.models import (
    CareerSuggestion,
    CoachingQuestion,
    DevelopmentGoal,
    DevelopmentPlan,
    ReflectionQuestion,
)

_CATEGORY_RE = re.compile(r"CATEGORY:\s*(.+)")
_PURPOSE_RE = re.compile(r"PURPOSE:\s*(.+)")
_FOLLOW_UP_RE = re.compile(r"FOLLOW-UP:\s*(.+)")
_CONTEXT_RE = re.compile(r"CONTEXT:\s*(.+)")
_GUIDANCE_RE = re.compile(r"GUIDANCE:\s*(.+)")
_MATCH_RE = re.compile(r"MATCH:\s*(\d+)")
_DESCRIPTION_RE = re.compile(r"DESCRIPTION:\s*(.+)")
_ACTIVITIES_RE = re.compile(r"ACTIVITIES:\s*(.+)")
_DEVELOPMENT_RE = re.compile(r"DEVELOPMENT:\s*(.+)")
_NEXT_STEPS_RE = re.compile(r"NEXT_STEPS:\s*(.+)")

_SHORT_TERM_RE = re.compile(r"SHORT_TERM_GOALS[\s\S]*?(?=LONG_TERM_GOALS|$)")
_LONG_TERM_RE = re.compile(r"LONG_TERM_GOALS[\s\S]*?(?=SKILL_GAPS|RESOURCES|$)")
_SKILL_GAPS_RE = re.compile(r"SKILL_GAPS:\s*(.+)")
_RESOURCES_RE = re.compile(r"RESOURCES:\s*(.+)")
_GOAL_RE = re.compile(
    r"GOAL:\s*(.+?)\s*\|\s*ACTIONS:\s*(.+?)\s*\|\s*TIMELINE:\s*([^\n\]]+)"
)


def _split_pipe(value: str) -> list[str]:
    return [item.strip() for item in value.split("|") if item.strip()]


def _clean_marker_value(value: str) -> str:
    return value.strip().strip("[]*").strip()


def _sections(response: str, marker: str) -> list[str]:
    return [section for section in response.split(marker)[1:] if section.strip()]


def _first_line(section: str) -> str:
    lines = section.strip().splitlines()
    return _clean_marker_value(lines[0]) if lines else ""


def parse_coaching_questions(response: str) -> list[CoachingQuestion]:
    questions: list[CoachingQuestion] = []
    for section in _sections(response, "QUESTION:"):
        question = _first_line(section)
        category = _CATEGORY_RE.search(section)
        purpose = _PURPOSE_RE.search(section)
        if not (question and category and purpose):
            continue

        follow_up = _FOLLOW_UP_RE.search(section)
        questions.append(
            CoachingQuestion(
                question=question,
                category=_clean_marker_value(category.group(1)),
                purpose=_clean_marker_value(purpose.group(1)),
                follow_up=_split_pipe(follow_up.group(1)) if follow_up else [],
            )
        )
    return questions


def parse_reflection_questions(response: str) -> list[ReflectionQuestion]:
    questions: list[ReflectionQuestion] = []
    for section in _sections(response, "QUESTION:"):
        question = _first_line(section)
        context = _CONTEXT_RE.search(section)
        guidance = _GUIDANCE_RE.search(section)
        if not (question and context and guidance):
            continue

        questions.append(
            ReflectionQuestion(
                question=question,
                context=_clean_marker_value(context.group(1)),
                manager_guidance=_clean_marker_value(guidance.group(1)),
            )
        )
    return questions


def parse_career_suggestions(response: str) -> list[CareerSuggestion]:
    suggestions: list[CareerSuggestion] = []
    for section in _sections(response, "TITLE:"):
        title = _first_line(section)
        match = _MATCH_RE.search(section)
        description = _DESCRIPTION_RE.search(section)
        if not (title and match and description):
            continue

        activities = _ACTIVITIES_RE.search(section)
        development = _DEVELOPMENT_RE.search(section)
        next_steps = _NEXT_STEPS_RE.search(section)
        try:
            suggestion = CareerSuggestion(
                title=title,
                match=int(match.group(1)),
                description=_clean_marker_value(description.group(1)),
                key_activities=_split_pipe(activities.group(1)) if activities else [],
                development_areas=_split_pipe(development.group(1)) if development else [],
                next_steps=_split_pipe(next_steps.group(1)) if next_steps else [],
            )
        except ValidationError:
            # Out-of-range MATCH values
            continue
        suggestions.append(suggestion)
    return suggestions


def _parse_goals(text: str) -> list[DevelopmentGoal]:
    goals: list[DevelopmentGoal] = []
    for match in _GOAL_RE.finditer(text):
        actions = [
            item.strip() for item in re.split(r"[;|]", match.group(2)) if item.strip()
        ]
        goals.append(
            DevelopmentGoal(
                goal=_clean_marker_value(match.group(1)),
                actions=actions,
                timeline=_clean_marker_value(match.group(3)),
            )
        )
    return goals


def parse_development_plan(response: str) -> DevelopmentPlan:
    short_term = _SHORT_TERM_RE.search(response)
    long_term = _LONG_TERM_RE.search(response)
    skill_gaps = _SKILL_GAPS_RE.search(response)
    resources = _RESOURCES_RE.search(response)

    return DevelopmentPlan(
        short_term=_parse_goals(short_term.group(0)) if short_term else [],
        long_term=_parse_goals(long_term.group(0)) if long_term else [],
        skill_gaps=_split_pipe(skill_gaps.group(1)) if skill_gaps else [],
        resources=_split_pipe(resources.group(1)) if resources else [],
    )
