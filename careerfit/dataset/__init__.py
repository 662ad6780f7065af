"""Career reference dataset.

Public API:
    - ReferenceDataset: Current catalog with atomic snapshot publishing
    - CareerRecord: One career entry
    - DatasetSnapshot: Immutable catalog version
    - IngestionReport / RecordError: Upload validation results
    - load_dataset_file / parse_dataset_text: Dataset ingestion
"""

from careerfit.dataset.defaults import default_careers
from careerfit.dataset.loader import (
    load_dataset_file,
    parse_career_records,
    parse_dataset_text,
)
from careerfit.dataset.models import (
    CareerRecord,
    DatasetSnapshot,
    IngestionReport,
    RecordError,
)
from careerfit.dataset.repository import ReferenceDataset

__all__ = [
    "ReferenceDataset",
    "CareerRecord",
    "DatasetSnapshot",
    "IngestionReport",
    "RecordError",
    "default_careers",
    "load_dataset_file",
    "parse_career_records",
    "parse_dataset_text",
]
