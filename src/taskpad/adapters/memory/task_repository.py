"""In-memory implementation of TaskRepository."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from taskpad.models import Task, TaskCreate, TaskUpdate
from taskpad.repositories import TaskRepository

from .base import InMemoryStore, build_record, validate_input

logger = logging.getLogger(__name__)


class InMemoryTaskRepository(InMemoryStore[Task], TaskRepository):
    """In-memory task store; the single source of truth for task records."""

    entity = "Task"

    async def list_all(self) -> list[Task]:
        async with self._operation():
            return self.snapshot()

    async def get(self, task_id: int) -> Task | None:
        async with self._operation():
            return self._records.get(task_id)

    async def list_by_project(self, project_id: int) -> list[Task]:
        async with self._operation():
            tasks = [t for t in self._records.values() if t.project_id == project_id]
        return sorted(tasks, key=lambda t: (t.order, t.id))

    async def add(self, task_data: TaskCreate | Mapping[str, Any]) -> Task:
        data = validate_input(TaskCreate, task_data)
        async with self._operation():
            task = build_record(
                Task,
                {
                    "id": self._next_id,
                    "title": data.title,
                    "project_id": data.project_id,
                    "priority": data.priority,
                    "due_date": data.due_date,
                    "created_at": self._clock(),
                    "order": len(self._records),
                },
            )
            self._put(task, allocated=True)
        logger.debug(
            "Task added id=%s project=%s priority=%s due=%s",
            task.id,
            task.project_id,
            task.priority,
            task.due_date,
        )
        return task

    async def update(self, task_id: int, updates: TaskUpdate | Mapping[str, Any]) -> Task:
        if isinstance(updates, Mapping):
            updates = {k: v for k, v in updates.items() if k != "id"}
        changes = validate_input(TaskUpdate, updates).changes()
        async with self._operation():
            current = self._require(task_id)
            if "completed" in changes:
                if not changes["completed"]:
                    changes["completed_at"] = None
                elif not current.completed:
                    changes["completed_at"] = self._clock()
            task = build_record(Task, {**current.model_dump(), **changes})
            self._put(task)
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return task

    async def delete(self, task_id: int) -> bool:
        async with self._operation():
            self._remove(task_id)
        logger.debug("Task deleted id=%s", task_id)
        return True

    async def complete(self, task_id: int) -> Task:
        async with self._operation():
            current = self._require(task_id)
            task = current.model_copy(
                update={"completed": True, "completed_at": self._clock()}
            )
            self._put(task)
        logger.debug("Task completed id=%s", task_id)
        return task

    async def reopen(self, task_id: int) -> Task:
        async with self._operation():
            current = self._require(task_id)
            task = current.model_copy(update={"completed": False, "completed_at": None})
            self._put(task)
        logger.debug("Task reopened id=%s", task_id)
        return task

    async def reorder(self, project_id: int | None, task_ids: Sequence[int]) -> bool:
        async with self._operation():
            records = dict(self._records)
            moved = 0
            for index, task_id in enumerate(task_ids):
                task = records.get(task_id)
                if task is None:
                    continue
                records[task_id] = task.model_copy(update={"order": index})
                moved += 1
            self._commit(records)
        logger.debug(
            "Tasks reordered project=%s moved=%d skipped=%d",
            project_id,
            moved,
            len(task_ids) - moved,
        )
        return True
