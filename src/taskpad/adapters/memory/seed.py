"""Bundled seed records loaded into a fresh store."""

from __future__ import annotations

from datetime import datetime, timedelta

from taskpad.models import Project, Task

# (id, name, color)
_PROJECTS = [
    (1, "Personal", "#3b82f6"),
    (2, "Work", "#dc4c3e"),
    (3, "Errands", "#f59e0b"),
]

# (id, title, project_id, priority, due in days from today or None, completed)
_TASKS = [
    (1, "Review quarterly goals", None, 2, None, False),
    (2, "Book dentist appointment", 1, 3, -1, False),
    (3, "Prepare sprint demo", 2, 1, 0, False),
    (4, "Reply to design feedback", 2, 2, 0, False),
    (5, "Water the plants", 1, 4, 0, True),
    (6, "Pick up dry cleaning", 3, 4, 1, False),
    (7, "Write release notes", 2, 3, 3, False),
    (8, "Renew library books", 3, 4, 6, False),
    (9, "Plan weekend trip", 1, 4, 12, False),
    (10, "Sort out photo backups", None, 4, None, False),
]


def seed_projects() -> list[Project]:
    return [
        Project(id=pid, name=name, color=color, order=index)
        for index, (pid, name, color) in enumerate(_PROJECTS)
    ]


def seed_tasks(now: datetime) -> list[Task]:
    """Build the seed tasks with due dates relative to ``now``."""
    today = now.date()
    tasks = []
    for index, (tid, title, project_id, priority, due_in, completed) in enumerate(_TASKS):
        tasks.append(
            Task(
                id=tid,
                title=title,
                project_id=project_id,
                priority=priority,
                due_date=None if due_in is None else today + timedelta(days=due_in),
                created_at=now,
                completed=completed,
                completed_at=now if completed else None,
                order=index,
            )
        )
    return tasks
