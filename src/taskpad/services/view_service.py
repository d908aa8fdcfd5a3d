"""View service - derives the Inbox, Today, Upcoming and Project views.

Every view is a pure function of (all tasks, all projects, now). The service
re-reads the repositories on every call and never caches bucket membership,
so a view always reflects the latest mutation.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import date, datetime

from taskpad.models import (
    NotFoundError,
    Project,
    ProjectView,
    Task,
    TaskListView,
    TodayView,
    UpcomingDay,
    UpcomingView,
)
from taskpad.repositories import ProjectRepository, TaskRepository
from taskpad.utils.date_classifier import (
    Bucket,
    classify,
    priority_key,
    today_of,
    upcoming_key,
    upcoming_window,
)

logger = logging.getLogger(__name__)


def build_inbox(tasks: Iterable[Task]) -> TaskListView:
    """Tasks without a project, most recently created first."""
    inbox = [t for t in tasks if t.project_id is None]
    inbox.sort(key=lambda t: t.id, reverse=True)
    return TaskListView(tasks=inbox)


def build_today(tasks: Iterable[Task], now: date | datetime) -> TodayView:
    """Overdue group first, then due-today, each by priority then id.

    Completed tasks that were due today form a separate group.
    """
    today = today_of(now)
    overdue: list[Task] = []
    due_today: list[Task] = []
    completed: list[Task] = []

    for task in tasks:
        bucket = classify(task, now).bucket
        if bucket is Bucket.OVERDUE:
            overdue.append(task)
        elif bucket is Bucket.DUE_TODAY:
            due_today.append(task)
        elif task.completed and task.due_date == today:
            completed.append(task)

    return TodayView(
        overdue=sorted(overdue, key=priority_key),
        due_today=sorted(due_today, key=priority_key),
        completed=sorted(completed, key=priority_key),
    )


def build_upcoming(tasks: Iterable[Task], now: date | datetime) -> UpcomingView:
    """Incomplete tasks due within the next seven days, one group per day.

    Days without tasks are omitted; each group is ordered by id.
    """
    window = upcoming_window(now)
    by_day: dict[date, list[Task]] = defaultdict(list)
    for task in sorted(tasks, key=upcoming_key):
        result = classify(task, now)
        if result.bucket is Bucket.UPCOMING and result.day is not None:
            by_day[result.day].append(task)

    days = [
        UpcomingDay(day=day, tasks=by_day[day])
        for day in window
        if by_day.get(day)
    ]
    return UpcomingView(window=window, days=days)


def build_project(project: Project, tasks: Iterable[Task]) -> ProjectView:
    """Tasks of one project ordered by manual position (ties by id)."""
    project_tasks = [t for t in tasks if t.project_id == project.id]
    project_tasks.sort(key=lambda t: (t.order, t.id))
    return ProjectView(project=project, tasks=project_tasks)


def count_project_tasks(tasks: Iterable[Task], projects: Iterable[Project]) -> dict[int, int]:
    """Number of incomplete tasks per project, zero for empty projects."""
    counts = {project.id: 0 for project in projects}
    for task in tasks:
        if not task.completed and task.project_id in counts:
            counts[task.project_id] += 1
    return counts


class ViewService:
    """Service producing the named task views from the repositories."""

    def __init__(self, task_repository: TaskRepository, project_repository: ProjectRepository):
        """Initialize the view service.

        Args:
            task_repository: TaskRepository implementation for data access
            project_repository: ProjectRepository implementation for data access
        """
        self.task_repository = task_repository
        self.project_repository = project_repository

    async def inbox(self) -> TaskListView:
        view = build_inbox(await self.task_repository.list_all())
        logger.debug("inbox view: %d tasks", len(view.tasks))
        return view

    async def today(self, now: date | datetime) -> TodayView:
        view = build_today(await self.task_repository.list_all(), now)
        logger.debug(
            "today view: %d overdue, %d due today, %d completed",
            len(view.overdue),
            len(view.due_today),
            len(view.completed),
        )
        return view

    async def upcoming(self, now: date | datetime) -> UpcomingView:
        view = build_upcoming(await self.task_repository.list_all(), now)
        logger.debug("upcoming view: %d tasks over %d days", view.total, len(view.days))
        return view

    async def project(self, project_id: int) -> ProjectView:
        """Tasks of a project.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.project_repository.get(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        view = build_project(project, await self.task_repository.list_all())
        logger.debug("project view %s: %d tasks", project_id, len(view.tasks))
        return view

    async def project_task_counts(self) -> dict[int, int]:
        projects = await self.project_repository.list_all()
        return count_project_tasks(await self.task_repository.list_all(), projects)
