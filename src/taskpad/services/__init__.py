"""Services module for taskpad - Business logic layer."""

from .planner import Planner, get_planner
from .project_service import ProjectService
from .task_service import TaskService
from .view_service import ViewService

__all__ = [
    "Planner",
    "get_planner",
    "TaskService",
    "ProjectService",
    "ViewService",
]
