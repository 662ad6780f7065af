"""Profile loading and validation utilities."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from careerfit.assessment.aggregator import InvalidProfileError
from careerfit.assessment.models import ASSESSMENT_STAGES, UserProfile

# A RIASEC profile whose highest and lowest dimensions are this close gives
# the matcher very little to differentiate careers with.
FLAT_PROFILE_SPREAD = 10.0


class ProfileService:
    """Service for loading and validating completed profiles."""

    def load_profile(self, path: Path | str) -> UserProfile:
        """Load and validate a completed profile from YAML or JSON.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file cannot be parsed into a mapping.
            InvalidProfileError: If the mapping is not a valid profile.
        """
        profile_path = Path(path)
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile_path}")

        suffix = profile_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            data = self._load_yaml(profile_path)
        elif suffix == ".json":
            data = self._load_json(profile_path)
        else:
            data = self._load_unknown(profile_path)

        try:
            return UserProfile.model_validate(data)
        except ValidationError as e:
            raise InvalidProfileError(f"Invalid profile {profile_path}: {e}", e) from e

    def validate_profile(self, profile: UserProfile) -> list[str]:
        """Return warnings for profiles that will match poorly."""
        warnings: list[str] = []

        missing_stages = [
            stage
            for stage in ASSESSMENT_STAGES
            if stage not in profile.completed_assessments
        ]
        if missing_stages:
            warnings.append(f"Stages not completed: {', '.join(missing_stages)}")
        if not profile.skills_confidence:
            warnings.append("No skill ratings; skill coverage will be neutral")
        if not profile.work_values:
            warnings.append("No work values; value alignment will be neutral")

        scores = profile.riasec_scores.as_dict().values()
        if max(scores) - min(scores) < FLAT_PROFILE_SPREAD:
            warnings.append("RIASEC profile is flat; rankings will be weakly differentiated")

        return warnings

    def _load_yaml(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML profile: {path}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Profile must be a mapping/dict: {path}")
        return data

    def _load_json(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON profile: {path}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Profile must be a mapping/dict: {path}")
        return data

    def _load_unknown(self, path: Path) -> dict:
        """Auto-detect and load a profile when the file extension is unknown."""
        raw = path.read_text(encoding="utf-8")

        # Try JSON first if it looks like JSON, otherwise fall back to YAML.
        if raw.lstrip().startswith("{"):
            try:
                data = json.loads(raw)
            except json.JSONDecodeError:
                data = None
            else:
                if not isinstance(data, dict):
                    raise ValueError(f"Profile must be a mapping/dict: {path}")
                return data

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid profile format: {path}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Profile must be a mapping/dict: {path}")
        return data
