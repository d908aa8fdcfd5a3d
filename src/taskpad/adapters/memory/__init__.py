"""In-memory entity store adapters."""

from .project_repository import InMemoryProjectRepository
from .seed import seed_projects, seed_tasks
from .task_repository import InMemoryTaskRepository

__all__ = [
    "InMemoryTaskRepository",
    "InMemoryProjectRepository",
    "seed_projects",
    "seed_tasks",
]
