"""
Strategy Pattern: Storage Strategy Container

A storage strategy owns the task and project repositories for one backend.
It is created once at startup and injected into the services, which never
know which backend they are talking to.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from taskpad.adapters.json_file import JsonFileStorage, Snapshot
from taskpad.adapters.memory import (
    InMemoryProjectRepository,
    InMemoryTaskRepository,
    seed_projects,
    seed_tasks,
)
from taskpad.repositories import ProjectRepository, TaskRepository
from taskpad.utils.clock import Clock, system_now


class StorageStrategy(ABC):
    """Abstract base class for storage strategies."""

    @property
    @abstractmethod
    def task_repository(self) -> TaskRepository:
        """Task repository implementation for this strategy."""

    @property
    @abstractmethod
    def project_repository(self) -> ProjectRepository:
        """Project repository implementation for this strategy."""

    @property
    @abstractmethod
    def storage_type(self) -> str:
        """Storage type identifier (for logging/debugging)."""


class MemoryStorageStrategy(StorageStrategy):
    """
    Purely in-memory storage.

    Data lives for the lifetime of the process; ``seed`` preloads the bundled
    sample records.
    """

    def __init__(self, *, seed: bool = False, latency: float = 0.0, clock: Clock | None = None):
        clock = clock or system_now
        self._task_repo = InMemoryTaskRepository(
            seed_tasks(clock()) if seed else (), latency=latency, clock=clock
        )
        self._project_repo = InMemoryProjectRepository(
            seed_projects() if seed else (), latency=latency, clock=clock
        )

    @property
    def task_repository(self) -> InMemoryTaskRepository:
        return self._task_repo

    @property
    def project_repository(self) -> InMemoryProjectRepository:
        return self._project_repo

    @property
    def storage_type(self) -> str:
        return "memory"


class JsonFileStorageStrategy(StorageStrategy):
    """
    In-memory stores snapshotted to a JSON file after every mutation.

    When the file does not exist yet the stores start from the seed records
    (or empty, with ``seed=False``) and the file is created on first write.
    A failed write raises StorageError and leaves the in-memory state unchanged.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        seed: bool = True,
        latency: float = 0.0,
        clock: Clock | None = None,
    ):
        clock = clock or system_now
        self.storage = JsonFileStorage(path)

        if self.storage.exists():
            snapshot = self.storage.load()
        elif seed:
            snapshot = Snapshot(tasks=seed_tasks(clock()), projects=seed_projects())
        else:
            snapshot = Snapshot()

        self._task_repo = InMemoryTaskRepository(
            snapshot.tasks,
            next_id=snapshot.next_task_id,
            latency=latency,
            clock=clock,
            on_commit=self._tasks_committed,
        )
        self._project_repo = InMemoryProjectRepository(
            snapshot.projects,
            next_id=snapshot.next_project_id,
            latency=latency,
            clock=clock,
            on_commit=self._projects_committed,
        )

    def _tasks_committed(self, tasks: list, next_id: int) -> None:
        self.storage.save(
            Snapshot(
                next_task_id=next_id,
                next_project_id=self._project_repo.next_id,
                tasks=tasks,
                projects=self._project_repo.snapshot(),
            )
        )

    def _projects_committed(self, projects: list, next_id: int) -> None:
        self.storage.save(
            Snapshot(
                next_task_id=self._task_repo.next_id,
                next_project_id=next_id,
                tasks=self._task_repo.snapshot(),
                projects=projects,
            )
        )

    @property
    def task_repository(self) -> InMemoryTaskRepository:
        return self._task_repo

    @property
    def project_repository(self) -> InMemoryProjectRepository:
        return self._project_repo

    @property
    def storage_type(self) -> str:
        return "file"
