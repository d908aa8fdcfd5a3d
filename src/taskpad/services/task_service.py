"""Task service - Business logic for task operations.

This service layer sits between the request API and the repositories,
providing a clean API for task-related business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any

from taskpad.models import DEFAULT_PRIORITY, NotFoundError, Task
from taskpad.repositories import TaskRepository
from taskpad.utils.nlp_parser import LocalNLPParser

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task business logic.

    This service encapsulates business rules and orchestrates task operations
    using the task repository.
    """

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository
        self.parser = LocalNLPParser()

    async def require_task(self, task_id: int) -> Task:
        """Get a task by ID.

        Raises:
            NotFoundError: If the task does not exist
        """
        task = await self.repository.get(task_id)
        if task is None:
            raise NotFoundError("Task", task_id)
        return task

    async def add_task(
        self,
        fields: Mapping[str, Any] | None = None,
        **values: Any,
    ) -> Task:
        """Create a new task.

        Args:
            fields: Mapping with ``title`` (required) and optionally
                ``project_id``, ``priority`` and ``due_date`` (date or ISO
                ``YYYY-MM-DD`` string)
            **values: Fields merged over ``fields``

        Returns:
            Created Task object
        """
        return await self.repository.add({**(fields or {}), **values})

    async def quick_add_task(
        self,
        title: str,
        now: date | datetime,
        *,
        project_id: int | None = None,
        priority: int = DEFAULT_PRIORITY,
    ) -> Task:
        """Create a task, inferring its due date from the title.

        The title is stored as typed (trimmed); phrases such as "tomorrow" or
        "friday" only set the due date.

        Args:
            title: Free-text task title
            now: Reference time for relative date phrases
            project_id: Parent project ID, None for the Inbox
            priority: Priority level (1-4)

        Returns:
            Created Task object
        """
        due_date = self.parser.parse_date(title, now)
        task = await self.add_task(
            title=title, project_id=project_id, priority=priority, due_date=due_date
        )
        if due_date:
            logger.info("Due date set automatically for task %s: %s", task.id, due_date)
        return task

    async def update_task(
        self,
        task_id: int,
        updates: Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> Task:
        """Update an existing task.

        Only the given fields change; pass ``due_date=None`` or
        ``project_id=None`` to clear them.

        Args:
            task_id: Task ID to update
            updates: Mapping of fields to update
            **fields: Fields to update, merged over ``updates``

        Returns:
            Updated Task object
        """
        return await self.repository.update(task_id, {**(updates or {}), **fields})

    async def delete_task(self, task_id: int) -> bool:
        """Delete a task."""
        return await self.repository.delete(task_id)

    async def complete_task(self, task_id: int) -> Task:
        """Mark a task as completed.

        Completing an already-completed task re-stamps ``completed_at``.
        """
        return await self.repository.complete(task_id)

    async def reopen_task(self, task_id: int) -> Task:
        """Reopen a completed task."""
        return await self.repository.reopen(task_id)

    async def reorder_tasks(self, project_id: int | None, task_ids: Sequence[int]) -> bool:
        """Apply a manual ordering to the given tasks.

        Args:
            project_id: Scope of the ordering (None for the Inbox)
            task_ids: Task IDs in their new order; unknown IDs are skipped

        Returns:
            True once applied
        """
        return await self.repository.reorder(project_id, list(task_ids))
