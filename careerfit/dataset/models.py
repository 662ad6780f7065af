"""Data models for the career reference dataset."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from careerfit.assessment.models import RiasecType

_LIST_SPLIT_RE = re.compile(r"[|;]")


def _split_list_field(value: object) -> tuple[str, ...]:
    """Accept a list or a '|'/';'-separated string (CSV cells)."""
    if value is None:
        return ()
    if isinstance(value, str):
        items = _LIST_SPLIT_RE.split(value)
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = [str(item) for item in value]
    else:
        raise ValueError(f"Expected a list or delimited string (got {type(value).__name__})")
    return tuple(item.strip() for item in items if item and item.strip())


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        value = value.strip().lower()
        return value or None
    return value


class CareerRecord(BaseModel):
    """One career in the reference dataset.

    Records are immutable. Field names accept both snake_case and the
    camelCase keys used by uploaded datasets.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Unique career identifier")
    title: str = Field(..., min_length=1, description="Career title")
    description: str = Field(default="", description="Short description")
    primary_type: RiasecType | None = Field(
        default=None,
        validation_alias=AliasChoices("primary_type", "primaryType"),
        description="Dominant RIASEC type",
    )
    secondary_type: RiasecType | None = Field(
        default=None,
        validation_alias=AliasChoices("secondary_type", "secondaryType"),
        description="Optional secondary RIASEC type",
    )
    required_skills: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("required_skills", "requiredSkills"),
        description="Skill identifiers the career relies on",
    )
    work_environment: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("work_environment", "workEnvironment"),
        description="Work environment tags",
    )
    work_values: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("work_values", "workValues"),
        description="Work values the career rewards (derived when empty)",
    )
    salary_range: str = Field(
        default="",
        validation_alias=AliasChoices("salary_range", "salaryRange"),
    )
    growth_outlook: str = Field(
        default="",
        validation_alias=AliasChoices("growth_outlook", "growthOutlook"),
    )
    education: str = Field(default="")

    @field_validator("id", "title", mode="before")
    @classmethod
    def strip_required_text(cls, v: object) -> object:
        if v is None:
            return v
        return str(v).strip()

    @field_validator("description", "salary_range", "growth_outlook", "education", mode="before")
    @classmethod
    def none_to_empty(cls, v: object) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("primary_type", "secondary_type", mode="before")
    @classmethod
    def normalize_riasec_type(cls, v: object) -> object:
        return _blank_to_none(v)

    @field_validator("required_skills", "work_environment", "work_values", mode="before")
    @classmethod
    def parse_list_fields(cls, v: object) -> tuple[str, ...]:
        return _split_list_field(v)

    @model_validator(mode="after")
    def validate_secondary_type(self) -> CareerRecord:
        if self.secondary_type is not None:
            if self.primary_type is None:
                raise ValueError("secondaryType requires a primaryType")
            if self.secondary_type == self.primary_type:
                raise ValueError(
                    f"secondaryType must differ from primaryType (both {self.primary_type!r})"
                )
        return self

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> CareerRecord:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


@dataclass(frozen=True)
class RecordError:
    """A dataset record rejected during ingestion."""

    index: int
    reason: str
    record_id: str | None = None

    def __str__(self) -> str:
        label = f"record {self.index}"
        if self.record_id:
            label += f" (id={self.record_id})"
        return f"{label}: {self.reason}"


@dataclass
class IngestionReport:
    """Outcome of ingesting one batch of career records.

    Attributes:
        source: File name or label the batch came from.
        records: Records that passed validation, in input order.
        errors: One entry per rejected record.
        size_bytes: Size of the uploaded payload, when known.
        ingested_at: When the batch was processed.
    """

    source: str
    records: list[CareerRecord] = field(default_factory=list)
    errors: list[RecordError] = field(default_factory=list)
    size_bytes: int | None = None
    ingested_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def status(self) -> Literal["completed", "error"]:
        return "completed" if self.records else "error"

    @property
    def error_messages(self) -> list[str]:
        return [str(error) for error in self.errors]

    def summary(self) -> str:
        return (
            f"{self.source}: {self.record_count} record(s) loaded, "
            f"{len(self.errors)} rejected"
        )


@dataclass(frozen=True)
class DatasetSnapshot:
    """An immutable, fully materialized version of the reference dataset."""

    records: tuple[CareerRecord, ...]
    version: int = 0
    source: str = "builtin"
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    _index: MappingProxyType = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index = {record.id: record for record in self.records}
        if len(index) != len(self.records):
            raise ValueError("DatasetSnapshot records must have unique ids")
        object.__setattr__(self, "_index", MappingProxyType(index))

    def __len__(self) -> int:
        return len(self.records)

    def by_id(self, career_id: str) -> CareerRecord | None:
        return self._index.get(career_id)

    @property
    def ids(self) -> list[str]:
        return [record.id for record in self.records]
