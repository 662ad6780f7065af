"""Ingestion of uploaded career datasets (JSON array or CSV with header).

Records are validated one by one: a record that fails validation is
reported and skipped while the rest of the batch still loads.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError

from careerfit.dataset.models import CareerRecord, IngestionReport, RecordError

logger = logging.getLogger(__name__)

DatasetFormat = Literal["json", "csv"]

REQUIRED_FIELDS: tuple[str, ...] = ("id", "title")


def _format_validation_error(error: ValidationError) -> str:
    parts: list[str] = []
    for item in error.errors():
        loc = ".".join(str(part) for part in item.get("loc", ()))
        msg = item.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def _missing_required(item: dict[str, Any]) -> list[str]:
    missing: list[str] = []
    for name in REQUIRED_FIELDS:
        value = item.get(name)
        if value is None or not str(value).strip():
            missing.append(name)
    return missing


def parse_career_records(
    items: Iterable[Any], *, source: str = "upload", size_bytes: int | None = None
) -> IngestionReport:
    """Validate raw career objects and collect per-record errors."""
    report = IngestionReport(source=source, size_bytes=size_bytes)
    seen_ids: set[str] = set()

    for index, item in enumerate(items):
        if not isinstance(item, dict):
            report.errors.append(
                RecordError(index=index, reason="record must be an object/mapping")
            )
            continue

        raw_id = item.get("id")
        record_id = str(raw_id).strip() if raw_id is not None else None

        missing = _missing_required(item)
        if missing:
            report.errors.append(
                RecordError(
                    index=index,
                    record_id=record_id or None,
                    reason=f"missing required field(s): {', '.join(missing)}",
                )
            )
            continue

        try:
            record = CareerRecord.model_validate(item)
        except ValidationError as e:
            report.errors.append(
                RecordError(
                    index=index,
                    record_id=record_id,
                    reason=_format_validation_error(e),
                )
            )
            continue

        if record.id in seen_ids:
            report.errors.append(
                RecordError(
                    index=index,
                    record_id=record.id,
                    reason="duplicate id (first occurrence kept)",
                )
            )
            continue

        seen_ids.add(record.id)
        report.records.append(record)

    for error in report.errors:
        logger.warning("Rejected career %s", error)
    logger.info(report.summary())
    return report


def _json_items(text: str, source: str) -> list[Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON dataset: {source}") from e

    # Accept {"careers": [...]} as well as a bare array.
    if isinstance(data, dict) and isinstance(data.get("careers"), list):
        data = data["careers"]
    if not isinstance(data, list):
        raise ValueError(f"Dataset must be an array of career objects: {source}")
    return data


def _csv_items(text: str, source: str) -> list[dict[str, Any]]:
    reader = csv.DictReader(io.StringIO(text))
    if not reader.fieldnames:
        raise ValueError(f"CSV dataset has no header row: {source}")

    items: list[dict[str, Any]] = []
    for row in reader:
        item: dict[str, Any] = {}
        for key, value in row.items():
            if key is None:
                continue
            cell = value.strip() if isinstance(value, str) else value
            item[key.strip()] = cell if cell not in ("", None) else None
        items.append(item)
    return items


def detect_format(text: str) -> DatasetFormat:
    stripped = text.lstrip()
    if stripped.startswith("[") or stripped.startswith("{"):
        return "json"
    return "csv"


def parse_dataset_text(
    text: str, *, fmt: DatasetFormat | None = None, source: str = "upload"
) -> IngestionReport:
    """Parse an uploaded payload and validate its records.

    Raises:
        ValueError: If the payload itself cannot be read as a dataset.
    """
    fmt = fmt or detect_format(text)
    if fmt == "json":
        items = _json_items(text, source)
    elif fmt == "csv":
        items = _csv_items(text, source)
    else:
        raise ValueError(f"Unsupported dataset format: {fmt}")

    return parse_career_records(
        items, source=source, size_bytes=len(text.encode("utf-8"))
    )


def load_dataset_file(path: Path | str) -> IngestionReport:
    """Load and validate a dataset file (.json, .csv, or auto-detected)."""
    dataset_path = Path(path)
    if not dataset_path.exists():
        raise FileNotFoundError(f"Dataset not found: {dataset_path}")

    text = dataset_path.read_text(encoding="utf-8-sig")
    suffix = dataset_path.suffix.lower()
    fmt: DatasetFormat | None
    if suffix == ".json":
        fmt = "json"
    elif suffix == ".csv":
        fmt = "csv"
    else:
        fmt = None

    return parse_dataset_text(text, fmt=fmt, source=dataset_path.name)
