"""Reference dataset holding the career catalog currently in effect."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from careerfit.config.settings import DatasetMode
from careerfit.dataset.defaults import default_careers
from careerfit.dataset.loader import load_dataset_file
from careerfit.dataset.models import CareerRecord, DatasetSnapshot, IngestionReport

logger = logging.getLogger(__name__)


class ReferenceDataset:
    """Publishes immutable dataset snapshots.

    Readers take the current snapshot reference without locking; a reload
    builds a complete new snapshot first and then swaps the reference, so a
    reader sees either the old or the new version, never a mix. The lock only
    serializes writers.
    """

    def __init__(
        self,
        records: Iterable[CareerRecord] | None = None,
        *,
        source: str = "builtin",
    ) -> None:
        self._defaults: tuple[CareerRecord, ...] = (
            tuple(records) if records is not None else default_careers()
        )
        self._write_lock = threading.Lock()
        self._snapshot = DatasetSnapshot(records=self._defaults, version=0, source=source)

    @property
    def snapshot(self) -> DatasetSnapshot:
        """Return the snapshot currently in effect."""
        return self._snapshot

    @property
    def version(self) -> int:
        return self._snapshot.version

    def load(self) -> tuple[CareerRecord, ...]:
        """Return every career record currently in effect."""
        return self._snapshot.records

    def by_id(self, career_id: str) -> CareerRecord | None:
        """Return the record with ``career_id``, or None if not found."""
        return self._snapshot.by_id(career_id)

    def publish(
        self,
        records: Iterable[CareerRecord],
        *,
        mode: DatasetMode | str = DatasetMode.REPLACE,
        source: str = "upload",
    ) -> DatasetSnapshot:
        """Build a new snapshot from ``records`` and make it current.

        In ``extend`` mode the records are layered over the built-in
        defaults: an uploaded id replaces the default with the same id and
        new ids are appended. In ``replace`` mode only ``records`` remain.
        """
        mode = DatasetMode(mode)
        incoming = list(records)

        with self._write_lock:
            if mode == DatasetMode.EXTEND:
                merged = {record.id: record for record in self._defaults}
                for record in incoming:
                    merged[record.id] = record
                combined = tuple(merged.values())
            else:
                combined = tuple(incoming)

            snapshot = DatasetSnapshot(
                records=combined,
                version=self._snapshot.version + 1,
                source=source,
            )
            self._snapshot = snapshot

        logger.info(
            "Published dataset v%d from %s (%s): %d career(s)",
            snapshot.version,
            source,
            mode.value,
            len(snapshot),
        )
        return snapshot

    def reload_from_file(
        self, path: Path | str, *, mode: DatasetMode | str = DatasetMode.EXTEND
    ) -> IngestionReport:
        """Ingest a dataset file and publish the records that passed validation.

        Nothing is published when no record in the file is valid, so a bad
        upload never empties the catalog.
        """
        report = load_dataset_file(path)
        if report.records:
            self.publish(report.records, mode=mode, source=report.source)
        else:
            logger.warning(
                "No valid careers in %s; keeping dataset v%d", report.source, self.version
            )
        return report

    async def areload(
        self, path: Path | str, *, mode: DatasetMode | str = DatasetMode.EXTEND
    ) -> IngestionReport:
        """Async variant of :meth:`reload_from_file`.

        File reading and validation run in a worker thread; the snapshot is
        published only once it is fully built.
        """
        return await asyncio.to_thread(self.reload_from_file, path, mode=mode)

    def reset(self) -> DatasetSnapshot:
        """Restore the built-in catalog as a new snapshot version."""
        return self.publish(self._defaults, mode=DatasetMode.REPLACE, source="builtin")
