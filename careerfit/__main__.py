"""Main entry point for careerfit."""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from careerfit import __version__
from careerfit.config.settings import DatasetMode, Settings
from careerfit.utils.logging import configure_logging


def _top_n(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("--top-n must be a positive integer")
    return number


def _write_json(path: Path, payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, default=_default), encoding="utf-8")


def _resolve_output(path: Path, settings: Settings) -> Path:
    """Relative report paths are placed under ``settings.output_dir``."""
    if path.is_absolute():
        return path
    return settings.output_dir / path


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="careerfit",
        description="careerfit: RIASEC career assessment and matching",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  careerfit match --profile profiles/profile.example.yaml
  careerfit dataset data/careers.example.csv
  careerfit coach questions --profile profiles/profile.example.yaml
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    match_parser = subparsers.add_parser(
        "match",
        help="Rank careers for a completed profile",
    )
    match_parser.add_argument(
        "--profile", type=Path, required=True, help="Path to profile YAML/JSON"
    )
    match_parser.add_argument(
        "--dataset",
        type=Path,
        default=None,
        help="Uploaded career dataset (JSON/CSV); overrides DATASET_PATH",
    )
    match_parser.add_argument(
        "--dataset-mode",
        choices=[mode.value for mode in DatasetMode],
        default=None,
        help="Combine the uploaded dataset with the built-in catalog or replace it",
    )
    match_parser.add_argument(
        "--top-n", type=_top_n, default=None, help="Number of careers to return"
    )
    match_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the ranked results as JSON (relative paths go under OUTPUT_DIR)",
    )

    dataset_parser = subparsers.add_parser(
        "dataset",
        help="Validate a career dataset file and report rejected records",
    )
    dataset_parser.add_argument("path", type=Path, help="Path to a JSON or CSV dataset")

    coach_parser = subparsers.add_parser(
        "coach",
        help="Generate LLM coaching content for a profile",
    )
    coach_parser.add_argument(
        "kind",
        choices=["questions", "reflection", "careers", "plan"],
        help="Content to generate",
    )
    coach_parser.add_argument(
        "--profile", type=Path, required=True, help="Path to profile YAML/JSON"
    )

    return parser


def _run_match(parsed: argparse.Namespace, settings: Settings) -> int:
    from careerfit.assessment.aggregator import InvalidProfileError
    from careerfit.assessment.profile import ProfileService
    from careerfit.dataset.repository import ReferenceDataset
    from careerfit.matching.service import CareerMatcher

    profile_service = ProfileService()
    try:
        profile = profile_service.load_profile(parsed.profile)
    except (FileNotFoundError, ValueError, InvalidProfileError) as e:
        print(f"Error loading profile: {e}", file=sys.stderr)
        return 1

    for warning in profile_service.validate_profile(profile):
        print(f"Warning: {warning}", file=sys.stderr)

    dataset = ReferenceDataset()
    dataset_path = parsed.dataset or settings.dataset_path
    mode = parsed.dataset_mode or settings.dataset_mode
    if dataset_path is not None:
        try:
            report = dataset.reload_from_file(dataset_path, mode=mode)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error loading dataset: {e}", file=sys.stderr)
            return 1
        print(report.summary())
        for message in report.error_messages:
            print(f"  rejected {message}")

    matcher = CareerMatcher(dataset=dataset)
    results = matcher.match(profile, top_n=parsed.top_n)
    print(matcher.format_results(results))

    if parsed.out is not None:
        out_path = _resolve_output(parsed.out, settings)
        _write_json(
            out_path,
            {
                "profile": profile.to_dict(),
                "dataset_version": dataset.version,
                "results": [result.to_dict() for result in results],
            },
        )
        print(f"Wrote: {out_path}")
    return 0


def _run_dataset(parsed: argparse.Namespace) -> int:
    from careerfit.dataset.loader import load_dataset_file

    try:
        report = load_dataset_file(parsed.path)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(report.summary())
    for record in report.records:
        print(f"  ok {record.id}: {record.title}")
    for message in report.error_messages:
        print(f"  rejected {message}")
    return 0 if report.status == "completed" else 1


def _run_coach(parsed: argparse.Namespace) -> int:
    from careerfit.assessment.aggregator import InvalidProfileError
    from careerfit.assessment.profile import ProfileService
    from careerfit.coaching.llm import CoachingLLMError
    from careerfit.coaching.service import CoachingService

    try:
        profile = ProfileService().load_profile(parsed.profile)
    except (FileNotFoundError, ValueError, InvalidProfileError) as e:
        print(f"Error loading profile: {e}", file=sys.stderr)
        return 1

    service = CoachingService()
    try:
        if parsed.kind == "questions":
            payload: object = service.generate_coaching_questions(profile)
        elif parsed.kind == "reflection":
            payload = service.generate_reflection_questions(profile)
        elif parsed.kind == "careers":
            payload = service.generate_career_recommendations(profile)
        else:
            payload = service.generate_development_plan(profile)
    except CoachingLLMError as e:
        print(f"Error generating coaching content: {e}", file=sys.stderr)
        return 1

    if isinstance(payload, list):
        print(json.dumps([item.model_dump(mode="json") for item in payload], indent=2))
    else:
        print(json.dumps(payload.model_dump(mode="json"), indent=2))  # type: ignore[attr-defined]
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"careerfit v{__version__} running {parsed.mode}")

    if parsed.mode == "match":
        return _run_match(parsed, settings)
    if parsed.mode == "dataset":
        return _run_dataset(parsed)
    if parsed.mode == "coach":
        return _run_coach(parsed)

    return 0


if __name__ == "__main__":
    sys.exit(main())
