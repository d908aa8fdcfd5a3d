"""Planner - the request API consumed by presentation code.

Every call is request/response: list calls derive a fresh view from the store,
mutations go straight to the store. Errors surface as ValidationError or
NotFoundError (StorageError for the file backend) and are never swallowed.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any

from taskpad.models import (
    DEFAULT_PRIORITY,
    Project,
    ProjectView,
    Task,
    TaskListView,
    TodayView,
    UpcomingView,
)
from taskpad.models.storage_strategy import StorageStrategy
from taskpad.services.project_service import ProjectService
from taskpad.services.task_service import TaskService
from taskpad.services.view_service import ViewService
from taskpad.utils.clock import Clock, make_clock, system_now


class Planner:
    """Facade over the task, project and view services.

    Args:
        strategy: Storage strategy providing the repositories
        clock: Source of "now" for date views and quick add
    """

    def __init__(self, strategy: StorageStrategy, clock: Clock | None = None):
        self.strategy = strategy
        self.clock = clock or system_now
        self.tasks = TaskService(strategy.task_repository)
        self.projects = ProjectService(strategy.project_repository)
        self.views = ViewService(strategy.task_repository, strategy.project_repository)

    def now(self) -> datetime:
        return self.clock()

    def _resolve_now(self, now: date | datetime | None) -> date | datetime:
        return self.clock() if now is None else now

    # ---- views ----

    async def list_inbox(self) -> TaskListView:
        return await self.views.inbox()

    async def list_today(self, now: date | datetime | None = None) -> TodayView:
        return await self.views.today(self._resolve_now(now))

    async def list_upcoming(self, now: date | datetime | None = None) -> UpcomingView:
        return await self.views.upcoming(self._resolve_now(now))

    async def list_by_project(self, project_id: int) -> ProjectView:
        return await self.views.project(project_id)

    async def today_count(self, now: date | datetime | None = None) -> int:
        """Incomplete overdue and due-today tasks (the Today badge)."""
        return (await self.list_today(now)).pending_count

    async def project_task_counts(self) -> dict[int, int]:
        return await self.views.project_task_counts()

    # ---- tasks ----

    async def get_task(self, task_id: int) -> Task:
        return await self.tasks.require_task(task_id)

    async def create_task(self, fields: Mapping[str, Any]) -> Task:
        return await self.tasks.add_task(fields)

    async def quick_add(
        self,
        title: str,
        *,
        project_id: int | None = None,
        priority: int = DEFAULT_PRIORITY,
        now: date | datetime | None = None,
    ) -> Task:
        return await self.tasks.quick_add_task(
            title, self._resolve_now(now), project_id=project_id, priority=priority
        )

    async def update_task(self, task_id: int, fields: Mapping[str, Any]) -> Task:
        return await self.tasks.update_task(task_id, fields)

    async def complete_task(self, task_id: int) -> Task:
        return await self.tasks.complete_task(task_id)

    async def reopen_task(self, task_id: int) -> Task:
        return await self.tasks.reopen_task(task_id)

    async def delete_task(self, task_id: int) -> bool:
        return await self.tasks.delete_task(task_id)

    async def reorder_tasks(self, scope_id: int | None, ordered_ids: Sequence[int]) -> bool:
        return await self.tasks.reorder_tasks(scope_id, ordered_ids)

    # ---- projects ----

    async def list_projects(self) -> list[Project]:
        return await self.projects.list_projects()

    async def get_project(self, project_id: int) -> Project:
        return await self.projects.require_project(project_id)

    async def create_project(self, fields: Mapping[str, Any]) -> Project:
        return await self.projects.create_project(fields)

    async def update_project(self, project_id: int, fields: Mapping[str, Any]) -> Project:
        return await self.projects.update_project(project_id, fields)

    async def delete_project(self, project_id: int) -> bool:
        return await self.projects.delete_project(project_id)

    async def toggle_project_collapse(self, project_id: int) -> Project:
        return await self.projects.toggle_collapse(project_id)


def get_planner(profile: str = "default") -> Planner:
    """Factory function to get a Planner for the active configuration."""
    from taskpad.config import get_config_manager
    from taskpad.services.context_manager import get_strategy_context

    config = get_config_manager(profile).config
    return Planner(get_strategy_context(profile), clock=make_clock(config.ui.timezone))
