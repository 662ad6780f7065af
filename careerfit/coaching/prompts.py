"""Prompt builders for LLM-generated coaching content."""

from __future__ import annotations

from careerfit.assessment.models import UserProfile

COACHING_SYSTEM_PROMPT = (
    "You are an expert career coach specializing in RIASEC personality assessments. "
    "Generate thoughtful, personalized coaching questions that help individuals explore "
    "their career paths based on their RIASEC profile, skills, and work values."
)

REFLECTION_SYSTEM_PROMPT = (
    "You are an expert in organizational psychology and team management. Generate "
    "meaningful reflection questions that managers can use to support their team "
    "members' development based on RIASEC personality profiles."
)

CAREER_SYSTEM_PROMPT = (
    "You are a career counselor with expertise in RIASEC theory and career development. "
    "Provide detailed, personalized career recommendations based on the individual's "
    "RIASEC profile, skills, and work values."
)

DEVELOPMENT_SYSTEM_PROMPT = (
    "You are a career development specialist. Create comprehensive, actionable "
    "development plans that help individuals grow their careers based on their RIASEC "
    "profile and current skill levels."
)


def _riasec_lines(profile: UserProfile) -> list[str]:
    return [
        f"- {dim.capitalize()}: {score:g}%"
        for dim, score in profile.riasec_scores.top_types(3)
    ]


def _skill_lines(profile: UserProfile, limit: int | None = None) -> list[str]:
    ordered = sorted(
        profile.skills_confidence.items(), key=lambda item: (-item[1], item[0])
    )
    if limit is not None:
        ordered = ordered[:limit]
    if not ordered:
        return ["- (none rated)"]
    return [f"- {skill}: {rating}/5" for skill, rating in ordered]


def _value_lines(profile: UserProfile, limit: int | None = None) -> list[str]:
    values = list(profile.work_values)
    if limit is not None:
        values = values[:limit]
    if not values:
        return ["- (none selected)"]
    return [f"- {value}" for value in values]


def build_coaching_prompt(profile: UserProfile) -> str:
    """Build the prompt for individual coaching questions."""
    return "\n".join(
        [
            "Generate 8-10 personalized coaching questions for an individual with the following profile:",
            "",
            "RIASEC Scores:",
            *_riasec_lines(profile),
            "",
            "Top Skills (confidence level 1-5):",
            *_skill_lines(profile, limit=5),
            "",
            "Work Values:",
            *_value_lines(profile, limit=5),
            "",
            "Please generate questions in the following categories:",
            "1. Career Exploration (2-3 questions)",
            "2. Skill Development (2-3 questions)",
            "3. Goal Setting (2-3 questions)",
            "4. Self Reflection (2-3 questions)",
            "",
            "Format each question as:",
            "QUESTION: [The coaching question]",
            "CATEGORY: [exploration/development/goal-setting/reflection]",
            "PURPOSE: [Why this question is valuable for this person]",
            "FOLLOW-UP: [2-3 follow-up questions separated by |]",
            "",
            "Focus on their dominant RIASEC types and work values. "
            "Make questions specific and actionable.",
        ]
    )


def build_reflection_prompt(profile: UserProfile) -> str:
    """Build the prompt for manager reflection questions."""
    return "\n".join(
        [
            "Generate 8-10 reflection questions that a manager can use with a team member who has this profile:",
            "",
            "RIASEC Scores:",
            *_riasec_lines(profile),
            "",
            "Top Skills:",
            *_skill_lines(profile, limit=5),
            "",
            "Work Values:",
            *_value_lines(profile, limit=5),
            "",
            "Generate questions for these contexts:",
            "1. Development Conversations (3-4 questions)",
            "2. Performance Reviews (3-4 questions)",
            "3. Career Planning (2-3 questions)",
            "",
            "Format each question as:",
            "QUESTION: [The reflection question]",
            "CONTEXT: [development/performance/career_planning]",
            "GUIDANCE: [Specific guidance for the manager on how to use this question effectively]",
            "",
            "Focus on helping the manager understand how to leverage this person's RIASEC strengths.",
        ]
    )


def build_career_prompt(profile: UserProfile) -> str:
    """Build the prompt for LLM career suggestions."""
    return "\n".join(
        [
            "Recommend 5-6 specific career paths for someone with this profile:",
            "",
            "RIASEC Scores:",
            *_riasec_lines(profile),
            "",
            "Skills & Confidence:",
            *_skill_lines(profile),
            "",
            "Work Values:",
            *_value_lines(profile),
            "",
            "For each career recommendation, provide:",
            "TITLE: [Specific job title/career path]",
            "MATCH: [Match percentage 1-100]",
            "DESCRIPTION: [2-3 sentence description of the role]",
            "ACTIVITIES: [3-4 key daily activities separated by |]",
            "DEVELOPMENT: [2-3 areas for skill development separated by |]",
            "NEXT_STEPS: [3-4 concrete next steps separated by |]",
            "",
            "Focus on careers that align with their dominant RIASEC types and work values.",
        ]
    )


def build_development_plan_prompt(profile: UserProfile) -> str:
    """Build the prompt for a development plan."""
    return "\n".join(
        [
            "Create a comprehensive development plan for someone with this profile:",
            "",
            "RIASEC Profile:",
            *_riasec_lines(profile),
            "",
            "Current Skills:",
            *_skill_lines(profile),
            "",
            "Work Values:",
            *_value_lines(profile),
            "",
            "Provide:",
            "",
            "SHORT_TERM_GOALS (3-6 months):",
            "[Format: GOAL: [goal] | ACTIONS: [action1; action2; action3] | TIMELINE: [timeline]]",
            "",
            "LONG_TERM_GOALS (1-2 years):",
            "[Format: GOAL: [goal] | ACTIONS: [action1; action2; action3] | TIMELINE: [timeline]]",
            "",
            "SKILL_GAPS:",
            "[List 4-5 key skill gaps to address, separated by |]",
            "",
            "RESOURCES:",
            "[List 5-6 specific resources (courses, books, certifications) separated by |]",
            "",
            "Focus on leveraging their RIASEC strengths while addressing development areas.",
        ]
    )
