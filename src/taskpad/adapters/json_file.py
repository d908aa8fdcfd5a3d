"""JSON snapshot persistence for the in-memory stores.

The whole dataset (tasks, projects and both id counters) is written to a single
JSON file after every successful mutation. Datasets are single-user task lists,
so rewriting the file each time keeps the format trivially consistent.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pydantic
from pydantic import BaseModel, Field

from taskpad.models import Project, StorageError, Task

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class Snapshot(BaseModel):
    """On-disk representation of the store."""

    version: int = SNAPSHOT_VERSION
    next_task_id: int = 1
    next_project_id: int = 1
    tasks: list[Task] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)


class JsonFileStorage:
    """Reads and atomically rewrites a snapshot file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Snapshot:
        """Load the snapshot from disk.

        Raises:
            StorageError: If the file cannot be read or does not hold a valid snapshot
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read data file {self.path}: {e}") from e
        try:
            snapshot = Snapshot.model_validate_json(raw)
        except pydantic.ValidationError as e:
            raise StorageError(f"Data file {self.path} is corrupt: {e.error_count()} error(s)") from e
        logger.debug(
            "Loaded snapshot path=%s tasks=%d projects=%d",
            self.path,
            len(snapshot.tasks),
            len(snapshot.projects),
        )
        return snapshot

    def save(self, snapshot: Snapshot) -> None:
        """Write the snapshot through a temporary file and swap it into place.

        Raises:
            StorageError: If the file cannot be written
        """
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageError(f"Cannot write data file {self.path}: {e}") from e
