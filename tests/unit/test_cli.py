from __future__ import annotations

import json
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
EXAMPLE_PROFILE = REPO_ROOT / "profiles" / "profile.example.yaml"
EXAMPLE_JSON = REPO_ROOT / "data" / "careers.example.json"
EXAMPLE_CSV = REPO_ROOT / "data" / "careers.example.csv"


@pytest.fixture(autouse=True)
def _no_env_file(monkeypatch, tmp_path):
    # Settings read .env from the working directory.
    monkeypatch.chdir(tmp_path)


def test_cli_without_mode_prints_help(capsys) -> None:
    from careerfit.__main__ import main

    assert main([]) == 0
    assert "match" in capsys.readouterr().out


def test_cli_match_prints_ranked_careers(capsys) -> None:
    from careerfit.__main__ import main

    exit_code = main(["match", "--profile", str(EXAMPLE_PROFILE), "--top-n", "3"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith("1. ")
    assert "3. " in out
    assert "4. " not in out


def test_cli_match_writes_json_report(tmp_path) -> None:
    from careerfit.__main__ import main

    out_path = tmp_path / "reports" / "matches.json"

    exit_code = main(
        [
            "match",
            "--profile",
            str(EXAMPLE_PROFILE),
            "--dataset",
            str(EXAMPLE_JSON),
            "--out",
            str(out_path),
        ]
    )

    assert exit_code == 0
    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["dataset_version"] == 1
    assert payload["profile"]["name"] == "Jane Doe"
    assert len(payload["results"]) == 6
    scores = [result["total_score"] for result in payload["results"]]
    assert scores == sorted(scores, reverse=True)


def test_cli_match_replace_mode_uses_only_uploaded_careers(capsys) -> None:
    from careerfit.__main__ import main

    exit_code = main(
        [
            "match",
            "--profile",
            str(EXAMPLE_PROFILE),
            "--dataset",
            str(EXAMPLE_CSV),
            "--dataset-mode",
            "replace",
        ]
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "careers.example.csv: 3 record(s) loaded, 1 rejected" in out
    assert "(data-scientist)" not in out
    assert "(actuary)" in out


def test_cli_match_missing_profile_errors_cleanly(tmp_path, capsys) -> None:
    from careerfit.__main__ import main

    assert main(["match", "--profile", str(tmp_path / "missing.yaml")]) == 1
    assert "Error loading profile" in capsys.readouterr().err


def test_cli_match_rejects_non_positive_top_n() -> None:
    from careerfit.__main__ import main

    with pytest.raises(SystemExit):
        main(["match", "--profile", str(EXAMPLE_PROFILE), "--top-n", "0"])


def test_cli_dataset_reports_rejections(capsys) -> None:
    from careerfit.__main__ import main

    exit_code = main(["dataset", str(EXAMPLE_JSON)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "careers.example.json: 2 record(s) loaded, 2 rejected" in out
    assert "ok bioinformatician: Bioinformatician" in out
    assert "rejected record 2: missing required field(s): id" in out


def test_cli_dataset_with_no_valid_records_fails(tmp_path) -> None:
    from careerfit.__main__ import main

    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"title": "No id"}]), encoding="utf-8")

    assert main(["dataset", str(path)]) == 1


def test_cli_invalid_settings_env_errors(monkeypatch, capsys) -> None:
    from careerfit.__main__ import main

    monkeypatch.setenv("DATASET_MODE", "merge")

    assert main(["dataset", str(EXAMPLE_JSON)]) == 1
    assert "Error loading settings" in capsys.readouterr().err


def test_cli_coach_questions_uses_generator(monkeypatch, capsys) -> None:
    from careerfit.__main__ import main

    def _fake_generate(self, *, prompt, system_prompt=None, max_tokens=None):  # noqa: ARG001
        return (
            "QUESTION: Which research topics excite you?\n"
            "CATEGORY: exploration\n"
            "PURPOSE: Connects curiosity to careers\n"
        )

    monkeypatch.setattr("careerfit.coaching.llm.CoachingLLM.generate", _fake_generate)

    exit_code = main(["coach", "questions", "--profile", str(EXAMPLE_PROFILE)])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload[0]["question"] == "Which research topics excite you?"


def test_cli_coach_reports_llm_errors(monkeypatch, capsys) -> None:
    from careerfit.__main__ import main
    from careerfit.coaching.llm import CoachingLLMError

    def _failing_generate(self, *, prompt, system_prompt=None, max_tokens=None):  # noqa: ARG001
        raise CoachingLLMError("LLM authentication failed.")

    monkeypatch.setattr("careerfit.coaching.llm.CoachingLLM.generate", _failing_generate)

    assert main(["coach", "plan", "--profile", str(EXAMPLE_PROFILE)]) == 1
    assert "LLM authentication failed" in capsys.readouterr().err


def test_cli_match_relative_out_goes_under_output_dir(monkeypatch, tmp_path, capsys) -> None:
    from careerfit.__main__ import main

    reports_dir = tmp_path / "reports"
    monkeypatch.setenv("OUTPUT_DIR", str(reports_dir))

    exit_code = main(["match", "--profile", str(EXAMPLE_PROFILE), "--out", "matches.json"])

    assert exit_code == 0
    written = reports_dir / "matches.json"
    assert json.loads(written.read_text(encoding="utf-8"))["results"]
    assert f"Wrote: {written}" in capsys.readouterr().out
