"""Tests for career dataset models."""

import pytest
from pydantic import ValidationError


class TestCareerRecord:
    """Test CareerRecord validation."""

    def test_accepts_camel_case_keys(self):
        from careerfit.dataset.models import CareerRecord

        record = CareerRecord.model_validate(
            {
                "id": "data-scientist",
                "title": "Data Scientist",
                "primaryType": "Investigative",
                "secondaryType": "conventional",
                "requiredSkills": ["data-analysis", "programming"],
                "workEnvironment": ["remote-friendly"],
                "salaryRange": "$95k",
            }
        )

        assert record.primary_type == "investigative"
        assert record.secondary_type == "conventional"
        assert record.required_skills == ("data-analysis", "programming")
        assert record.work_environment == ("remote-friendly",)
        assert record.salary_range == "$95k"

    def test_splits_delimited_list_cells(self):
        """CSV cells may separate list items with '|' or ';'."""
        from careerfit.dataset.models import CareerRecord

        record = CareerRecord(
            id="actuary",
            title="Actuary",
            required_skills="statistics; mathematics | communication ;",
        )

        assert record.required_skills == ("statistics", "mathematics", "communication")

    def test_blank_secondary_type_becomes_none(self):
        from careerfit.dataset.models import CareerRecord

        record = CareerRecord(
            id="teacher", title="Teacher", primary_type="social", secondary_type="  "
        )

        assert record.secondary_type is None

    def test_rejects_secondary_equal_to_primary(self):
        from careerfit.dataset.models import CareerRecord

        with pytest.raises(ValidationError, match="must differ"):
            CareerRecord(
                id="art-therapist",
                title="Art Therapist",
                primary_type="social",
                secondary_type="social",
            )

    def test_rejects_secondary_without_primary(self):
        from careerfit.dataset.models import CareerRecord

        with pytest.raises(ValidationError, match="requires a primaryType"):
            CareerRecord(id="x", title="X", secondary_type="social")

    def test_rejects_unknown_riasec_type(self):
        from careerfit.dataset.models import CareerRecord

        with pytest.raises(ValidationError):
            CareerRecord(id="x", title="X", primary_type="adventurous")

    def test_rejects_blank_title(self):
        from careerfit.dataset.models import CareerRecord

        with pytest.raises(ValidationError):
            CareerRecord(id="x", title="   ")

    def test_ignores_unknown_fields(self):
        from careerfit.dataset.models import CareerRecord

        record = CareerRecord.model_validate({"id": "x", "title": "X", "icon": "star"})

        assert not hasattr(record, "icon")


class TestIngestionReport:
    """Test IngestionReport status and messages."""

    def test_status_completed_when_any_record_loaded(self, make_career):
        from careerfit.dataset.models import IngestionReport, RecordError

        report = IngestionReport(
            source="careers.json",
            records=[make_career("a")],
            errors=[RecordError(index=1, reason="missing required field(s): id")],
        )

        assert report.status == "completed"
        assert report.record_count == 1
        assert report.summary() == "careers.json: 1 record(s) loaded, 1 rejected"

    def test_status_error_when_nothing_loaded(self):
        from careerfit.dataset.models import IngestionReport

        assert IngestionReport(source="empty.csv").status == "error"

    def test_error_messages_include_index_and_id(self):
        from careerfit.dataset.models import RecordError

        assert str(RecordError(index=3, reason="bad", record_id="x")) == "record 3 (id=x): bad"
        assert str(RecordError(index=0, reason="bad")) == "record 0: bad"


class TestDatasetSnapshot:
    """Test DatasetSnapshot indexing."""

    def test_indexes_records_by_id(self, make_career):
        from careerfit.dataset.models import DatasetSnapshot

        snapshot = DatasetSnapshot(records=(make_career("a"), make_career("b")))

        assert len(snapshot) == 2
        assert snapshot.ids == ["a", "b"]
        assert snapshot.by_id("b").id == "b"
        assert snapshot.by_id("missing") is None

    def test_rejects_duplicate_ids(self, make_career):
        from careerfit.dataset.models import DatasetSnapshot

        with pytest.raises(ValueError, match="unique ids"):
            DatasetSnapshot(records=(make_career("a"), make_career("a")))
