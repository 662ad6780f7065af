"""Tests for CareerMatcher."""

import pytest


@pytest.fixture
def matcher_for(make_career):
    """Build a CareerMatcher over an explicit list of careers."""
    from careerfit.dataset.repository import ReferenceDataset
    from careerfit.matching.config import MatchingConfig
    from careerfit.matching.service import CareerMatcher

    def _build(careers, **config):
        return CareerMatcher(
            dataset=ReferenceDataset(records=careers),
            config=MatchingConfig(_env_file=None, **config),
        )

    return _build


class TestCareerMatcherRanking:
    """Test scoring and ranking of careers."""

    def test_investigative_career_outranks_unrelated(
        self, scenario_profile, make_career, matcher_for
    ):
        fit = make_career(
            "analyst", primary_type="investigative", required_skills=["data-analysis"]
        )
        unrelated = make_career(
            "clerk", primary_type="conventional", required_skills=["bookkeeping"]
        )
        matcher = matcher_for([unrelated, fit])

        results = matcher.match(scenario_profile)

        assert [r.career_id for r in results] == ["analyst", "clerk"]
        assert results[0].total_score > results[1].total_score
        assert results[0].match_score == 100
        assert results[0].breakdown.matched_skills == {"data-analysis": 5}
        assert results[1].breakdown.value_alignment == 0.0

    def test_ranking_is_deterministic(self, scenario_profile, matcher_for):
        from careerfit.dataset.defaults import default_careers

        matcher = matcher_for(default_careers(), top_n=16)

        first = matcher.match(scenario_profile)
        second = matcher.match(scenario_profile)

        assert [(r.career_id, r.total_score) for r in first] == [
            (r.career_id, r.total_score) for r in second
        ]

    def test_scores_stay_within_bounds(self, scenario_profile, matcher_for):
        from careerfit.dataset.defaults import default_careers

        results = matcher_for(default_careers(), top_n=16).match(scenario_profile)

        assert len(results) == len(default_careers())
        for result in results:
            assert 0.0 <= result.total_score <= 100.0
            assert 0 <= result.match_score <= 100

    def test_ties_break_on_id(self, scenario_profile, make_career, matcher_for):
        careers = [make_career(cid, primary_type="social") for cid in ("c", "a", "b")]

        results = matcher_for(careers).match(scenario_profile)

        assert [r.career_id for r in results] == ["a", "b", "c"]

    def test_equal_totals_prefer_higher_riasec_affinity(self, make_career):
        from careerfit.matching.models import MatchBreakdown, MatchResult
        from careerfit.matching.service import CareerMatcher

        low = MatchResult(
            career=make_career("a"),
            total_score=60.0,
            breakdown=MatchBreakdown(riasec_affinity=40.0, skill_coverage=90.0, value_alignment=70.0),
        )
        high = MatchResult(
            career=make_career("b"),
            total_score=60.0,
            breakdown=MatchBreakdown(riasec_affinity=80.0, skill_coverage=30.0, value_alignment=50.0),
        )

        assert [r.career_id for r in CareerMatcher.rank([low, high])] == ["b", "a"]

    def test_top_n_truncates(self, scenario_profile, matcher_for):
        from careerfit.dataset.defaults import default_careers

        matcher = matcher_for(default_careers(), top_n=3)

        assert len(matcher.match(scenario_profile)) == 3
        assert len(matcher.match(scenario_profile, top_n=5)) == 5

    def test_empty_dataset_returns_empty_list(self, scenario_profile, matcher_for):
        assert matcher_for([]).match(scenario_profile) == []

    def test_careers_argument_overrides_dataset(
        self, scenario_profile, make_career, matcher_for
    ):
        matcher = matcher_for([make_career("a")])

        results = matcher.match(scenario_profile, careers=[make_career("z")])

        assert [r.career_id for r in results] == ["z"]


class TestCareerMatcherNeutralBaseline:
    """Missing evidence yields the neutral baseline instead of zero."""

    def test_profile_without_skills_or_values(self, make_career, matcher_for):
        from careerfit.assessment.models import UserProfile

        profile = UserProfile(
            riasec_scores={
                "realistic": 10,
                "investigative": 10,
                "artistic": 10,
                "social": 10,
                "enterprising": 10,
                "conventional": 10,
            }
        )
        careers = [
            make_career("a", primary_type="social", required_skills=["empathy"]),
            make_career("b", primary_type="realistic", work_values=["stability"]),
        ]

        results = matcher_for(careers).match(profile)

        for result in results:
            assert result.breakdown.skill_coverage == 50.0
            assert result.breakdown.value_alignment == 50.0
            assert result.total_score == pytest.approx(0.5 * 100 + 0.3 * 50 + 0.2 * 50)


class TestCareerMatcherWeights:
    """Test weight overrides."""

    def test_mapping_override(self, scenario_profile, make_career, matcher_for):
        career = make_career(
            "ux", primary_type="artistic", required_skills=["design"]
        )

        result = matcher_for([career]).match(
            scenario_profile, weights={"riasec": 1.0, "skills": 0.0, "values": 0.0}
        )[0]

        assert result.total_score == pytest.approx(result.breakdown.riasec_affinity)

    def test_invalid_override_raises(self, scenario_profile, make_career, matcher_for):
        matcher = matcher_for([make_career("a")])

        with pytest.raises(ValueError):
            matcher.match(scenario_profile, weights={"riasec": 0.9, "skills": 0.9, "values": 0.0})


class TestEnsureValidProfile:
    """Test profile validation at the matching boundary."""

    def test_mapping_profile_is_validated(self, scenario_profile, matcher_for, make_career):
        matcher = matcher_for([make_career("a", primary_type="investigative")])

        results = matcher.match(scenario_profile.to_dict())

        assert results[0].breakdown.riasec_affinity == 100.0

    def test_mapping_missing_dimension_raises(self):
        from careerfit.assessment.aggregator import InvalidProfileError
        from careerfit.matching.service import ensure_valid_profile

        with pytest.raises(InvalidProfileError):
            ensure_valid_profile({"riasec_scores": {"investigative": 80}})

    def test_unvalidated_profile_missing_dimension_raises(self):
        from careerfit.assessment.aggregator import InvalidProfileError
        from careerfit.assessment.models import RIASECScore, UserProfile
        from careerfit.matching.service import ensure_valid_profile

        profile = UserProfile.model_construct(
            riasec_scores=RIASECScore.model_construct(investigative=80.0)
        )

        with pytest.raises(InvalidProfileError, match="missing dimension"):
            ensure_valid_profile(profile)

    def test_rejects_other_types(self):
        from careerfit.assessment.aggregator import InvalidProfileError
        from careerfit.matching.service import ensure_valid_profile

        with pytest.raises(InvalidProfileError):
            ensure_valid_profile(["investigative"])


class TestFormatResults:
    """Test the human-readable summary."""

    def test_formats_ranked_lines(self, scenario_profile, make_career, matcher_for):
        matcher = matcher_for(
            [make_career("analyst", title="Analyst", primary_type="investigative")]
        )

        text = matcher.format_results(matcher.match(scenario_profile))

        assert text.startswith("1. Analyst (analyst) - ")
        assert "Shared values: autonomy, learning" in text

    def test_formats_empty_results(self, matcher_for):
        assert matcher_for([]).format_results([]) == "No matching careers."
