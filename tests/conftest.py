"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Keep config singletons and .env files out of individual tests."""
    from careerfit.coaching.config import reset_coaching_config
    from careerfit.config.settings import reset_settings
    from careerfit.matching.config import reset_matching_config
    from careerfit.utils.logging import reset_logging

    for var in (
        "MATCHING_WEIGHT_RIASEC",
        "MATCHING_WEIGHT_SKILLS",
        "MATCHING_WEIGHT_VALUES",
        "MATCHING_TOP_N",
        "DATASET_PATH",
        "DATASET_MODE",
        "OUTPUT_DIR",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)

    reset_settings()
    reset_matching_config()
    reset_coaching_config()
    yield
    reset_settings()
    reset_matching_config()
    reset_coaching_config()
    reset_logging()


@pytest.fixture
def scenario_profile():
    """Investigative/artistic profile with one strong skill and two values."""
    from careerfit.assessment.models import UserProfile

    return UserProfile(
        riasec_scores={
            "realistic": 20,
            "investigative": 90,
            "artistic": 70,
            "social": 20,
            "enterprising": 20,
            "conventional": 20,
        },
        skills_confidence={"data-analysis": 5},
        work_values=["autonomy", "learning"],
    )


@pytest.fixture
def make_career():
    """Factory for CareerRecord test data."""
    from careerfit.dataset.models import CareerRecord

    def _make(career_id: str, **fields):
        data = {"id": career_id, "title": fields.pop("title", career_id.title())}
        data.update(fields)
        return CareerRecord.model_validate(data)

    return _make
