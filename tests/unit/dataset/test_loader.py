"""Tests for career dataset ingestion."""

import json
import logging

import pytest


class TestParseCareerRecords:
    """Test per-record validation of a batch."""

    def test_partial_batch_loads_valid_records(self):
        """Invalid records are reported while the rest of the batch loads."""
        from careerfit.dataset.loader import parse_career_records
        from careerfit.dataset.models import DatasetSnapshot

        items = [
            {"id": "a", "title": "A", "primaryType": "realistic"},
            {"title": "No Id"},
            {"id": "b", "title": "B", "primaryType": "social"},
            {"id": "c"},
            {"id": "d", "title": "D"},
        ]

        report = parse_career_records(items, source="batch.json")

        assert [record.id for record in report.records] == ["a", "b", "d"]
        assert len(report.errors) == 2
        assert report.errors[0].index == 1
        assert "id" in report.errors[0].reason
        assert report.errors[1].record_id == "c"
        assert "title" in report.errors[1].reason

        snapshot = DatasetSnapshot(records=tuple(report.records))
        assert snapshot.by_id("b").title == "B"

    def test_rejects_non_mapping_items(self):
        from careerfit.dataset.loader import parse_career_records

        report = parse_career_records(["not-a-record", {"id": "a", "title": "A"}])

        assert report.record_count == 1
        assert "object" in report.errors[0].reason

    def test_reports_field_validation_errors(self):
        from careerfit.dataset.loader import parse_career_records

        report = parse_career_records(
            [{"id": "x", "title": "X", "primaryType": "wizard"}]
        )

        assert report.status == "error"
        assert report.errors[0].record_id == "x"
        assert "primary" in report.errors[0].reason.lower()

    def test_duplicate_ids_keep_first_occurrence(self):
        from careerfit.dataset.loader import parse_career_records

        report = parse_career_records(
            [
                {"id": "a", "title": "First"},
                {"id": "a", "title": "Second"},
            ]
        )

        assert [record.title for record in report.records] == ["First"]
        assert "duplicate id" in report.errors[0].reason

    def test_logs_rejections(self, caplog):
        from careerfit.dataset.loader import parse_career_records

        with caplog.at_level(logging.WARNING, logger="careerfit.dataset.loader"):
            parse_career_records([{"title": "No Id"}], source="batch.json")

        assert "Rejected career record 0" in caplog.text


class TestParseDatasetText:
    """Test JSON and CSV payload parsing."""

    def test_parses_json_array(self):
        from careerfit.dataset.loader import parse_dataset_text

        payload = json.dumps([{"id": "a", "title": "A"}])

        report = parse_dataset_text(payload, source="upload.json")

        assert report.record_count == 1
        assert report.size_bytes == len(payload.encode("utf-8"))

    def test_parses_careers_wrapper_object(self):
        from careerfit.dataset.loader import parse_dataset_text

        report = parse_dataset_text(json.dumps({"careers": [{"id": "a", "title": "A"}]}))

        assert report.records[0].id == "a"

    def test_rejects_json_object_without_careers(self):
        from careerfit.dataset.loader import parse_dataset_text

        with pytest.raises(ValueError, match="array"):
            parse_dataset_text('{"id": "a"}', fmt="json")

    def test_rejects_malformed_json(self):
        from careerfit.dataset.loader import parse_dataset_text

        with pytest.raises(ValueError, match="Invalid JSON"):
            parse_dataset_text("[{", fmt="json")

    def test_parses_csv_with_header(self):
        from careerfit.dataset.loader import parse_dataset_text

        payload = (
            "id,title,primaryType,secondaryType,requiredSkills\n"
            "park-ranger,Park Ranger,realistic,social,first-aid;communication\n"
            ",Missing Id,social,,\n"
        )

        report = parse_dataset_text(payload)

        assert report.record_count == 1
        record = report.records[0]
        assert record.secondary_type == "social"
        assert record.required_skills == ("first-aid", "communication")
        assert report.errors[0].index == 1

    def test_detect_format(self):
        from careerfit.dataset.loader import detect_format

        assert detect_format('  [{"id": "a"}]') == "json"
        assert detect_format("id,title\n") == "csv"


class TestLoadDatasetFile:
    """Test loading dataset files from disk."""

    def test_loads_json_file(self, tmp_path):
        from careerfit.dataset.loader import load_dataset_file

        path = tmp_path / "careers.json"
        path.write_text(json.dumps([{"id": "a", "title": "A"}]), encoding="utf-8")

        report = load_dataset_file(path)

        assert report.source == "careers.json"
        assert report.record_count == 1

    def test_loads_csv_with_bom(self, tmp_path):
        from careerfit.dataset.loader import load_dataset_file

        path = tmp_path / "careers.csv"
        path.write_text("\ufeffid,title\na,A\n", encoding="utf-8")

        report = load_dataset_file(path)

        assert report.records[0].id == "a"

    def test_raises_file_not_found_error(self, tmp_path):
        from careerfit.dataset.loader import load_dataset_file

        with pytest.raises(FileNotFoundError):
            load_dataset_file(tmp_path / "missing.json")
