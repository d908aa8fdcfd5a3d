"""Repository abstraction layer for taskpad.

This module defines the abstract base classes (interfaces) for the entity store,
following the hexagonal architecture (Ports & Adapters) pattern.

Repositories are the single source of truth for task and project records. Any
backend (in-memory, file, remote) may implement them as long as the contract
below holds; views never cache what they read and re-query after every mutation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from taskpad.models import (
    Project,
    ProjectCreate,
    ProjectUpdate,
    Task,
    TaskCreate,
    TaskUpdate,
)


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    async def list_all(self) -> list[Task]:
        """List every task, in no implied order.

        Returns:
            A new list of Task objects
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    async def get(self, task_id: int) -> Task | None:
        """Get a specific task by ID.

        Args:
            task_id: Unique identifier for the task

        Returns:
            Task object, or None when the id is unknown
        """
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    async def list_by_project(self, project_id: int) -> list[Task]:
        """List the tasks of one project ordered by their manual position.

        Args:
            project_id: Project whose tasks are listed

        Returns:
            Tasks with ``project_id == project_id`` ordered by ``order``
        """
        raise NotImplementedError(
            "TaskRepository.list_by_project() must be implemented by adapter"
        )

    @abstractmethod
    async def add(self, task_data: TaskCreate | Mapping[str, Any]) -> Task:
        """Create a new task.

        Args:
            task_data: TaskCreate object or mapping with task details

        Returns:
            Created Task object with generated ID and timestamps

        Raises:
            ValidationError: If task data is invalid
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    async def update(self, task_id: int, updates: TaskUpdate | Mapping[str, Any]) -> Task:
        """Merge the provided fields into an existing task.

        Args:
            task_id: Unique identifier for the task
            updates: TaskUpdate object or mapping with fields to update

        Returns:
            Updated Task object

        Raises:
            NotFoundError: If task does not exist
            ValidationError: If update data is invalid
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    async def delete(self, task_id: int) -> bool:
        """Delete a task.

        Args:
            task_id: Unique identifier for the task

        Returns:
            True if deletion was successful

        Raises:
            NotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    async def complete(self, task_id: int) -> Task:
        """Mark a task as completed, stamping ``completed_at`` with the current time.

        Args:
            task_id: Unique identifier for the task

        Returns:
            Updated Task object with completed=True and completed_at set

        Raises:
            NotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.complete() must be implemented by adapter"
        )

    @abstractmethod
    async def reopen(self, task_id: int) -> Task:
        """Mark a task as not completed and clear ``completed_at``.

        Raises:
            NotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.reopen() must be implemented by adapter"
        )

    @abstractmethod
    async def reorder(self, project_id: int | None, task_ids: Sequence[int]) -> bool:
        """Assign ``order = index`` to each task in the given sequence.

        Tasks not listed keep their position; unknown ids are skipped.

        Args:
            project_id: Scope the ordering applies to (None for the Inbox)
            task_ids: Task IDs in their new order

        Returns:
            True once the new order is applied
        """
        raise NotImplementedError(
            "TaskRepository.reorder() must be implemented by adapter"
        )


class ProjectRepository(ABC):
    """Abstract base class for project persistence operations."""

    @abstractmethod
    async def list_all(self) -> list[Project]:
        """List all projects ordered by ``order`` ascending."""
        raise NotImplementedError(
            "ProjectRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    async def get(self, project_id: int) -> Project | None:
        """Get a specific project by ID, or None when the id is unknown."""
        raise NotImplementedError(
            "ProjectRepository.get() must be implemented by adapter"
        )

    @abstractmethod
    async def create(self, project_data: ProjectCreate | Mapping[str, Any]) -> Project:
        """Create a new project.

        Raises:
            ValidationError: If project data is invalid
        """
        raise NotImplementedError(
            "ProjectRepository.create() must be implemented by adapter"
        )

    @abstractmethod
    async def update(
        self, project_id: int, updates: ProjectUpdate | Mapping[str, Any]
    ) -> Project:
        """Merge the provided fields into an existing project.

        Raises:
            NotFoundError: If project does not exist
            ValidationError: If update data is invalid
        """
        raise NotImplementedError(
            "ProjectRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    async def delete(self, project_id: int) -> bool:
        """Delete a project. Its tasks are left untouched.

        Raises:
            NotFoundError: If project does not exist
        """
        raise NotImplementedError(
            "ProjectRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    async def toggle_collapse(self, project_id: int) -> Project:
        """Flip ``is_collapsed`` on a project.

        Raises:
            NotFoundError: If project does not exist
        """
        raise NotImplementedError(
            "ProjectRepository.toggle_collapse() must be implemented by adapter"
        )
