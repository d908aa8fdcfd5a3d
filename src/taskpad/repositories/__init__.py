"""Repository interfaces for taskpad.

This package contains abstract base classes (ABCs) that define the contracts
for data persistence operations. These are the "Ports" in the Hexagonal Architecture.

Implementations (Adapters) are in:
- taskpad.adapters.memory (in-memory store)
- taskpad.adapters.json_file (in-memory store snapshotted to a JSON file)
"""

from .repository import ProjectRepository, TaskRepository

__all__ = [
    "TaskRepository",
    "ProjectRepository",
]
