"""Taskpad domain models.

This package contains Pydantic models that represent the core domain entities
(tasks and projects), the derived view results, and the error taxonomy shared
by every layer.
"""

from .core import (
    DEFAULT_PRIORITY,
    DEFAULT_PROJECT_COLOR,
    Project,
    ProjectCreate,
    ProjectUpdate,
    Task,
    TaskCreate,
    TaskUpdate,
)
from .exceptions import NotFoundError, StorageError, TaskpadError, ValidationError
from .views import ProjectView, TaskListView, TodayView, UpcomingDay, UpcomingView

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "DEFAULT_PRIORITY",
    # Project models
    "Project",
    "ProjectCreate",
    "ProjectUpdate",
    "DEFAULT_PROJECT_COLOR",
    # View results
    "TaskListView",
    "ProjectView",
    "TodayView",
    "UpcomingDay",
    "UpcomingView",
    # Errors
    "TaskpadError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
]
