"""Read-only view results produced by the view query engine."""

from datetime import date

from pydantic import BaseModel, ConfigDict, computed_field

from .core import Project, Task


def _percentage(done: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(done / total * 100, 1)


class TaskListView(BaseModel):
    """An ordered task list split into incomplete and completed groups."""

    model_config = ConfigDict(frozen=True)

    tasks: list[Task]

    @property
    def incomplete(self) -> list[Task]:
        return [t for t in self.tasks if not t.completed]

    @property
    def completed(self) -> list[Task]:
        return [t for t in self.tasks if t.completed]

    @computed_field
    @property
    def progress(self) -> float:
        """Percentage of completed tasks in the list."""
        return _percentage(len(self.completed), len(self.tasks))


class ProjectView(TaskListView):
    """Tasks of a single project, ordered by manual sort position."""

    project: Project


class TodayView(BaseModel):
    """Overdue and due-today tasks, plus today's completed tasks.

    Attributes:
        overdue: Incomplete tasks due before today (priority, then id)
        due_today: Incomplete tasks due today (priority, then id)
        completed: Completed tasks that were due today (priority, then id)
    """

    model_config = ConfigDict(frozen=True)

    overdue: list[Task]
    due_today: list[Task]
    completed: list[Task]

    @property
    def tasks(self) -> list[Task]:
        return [*self.overdue, *self.due_today, *self.completed]

    @computed_field
    @property
    def pending_count(self) -> int:
        """Number of incomplete tasks shown in the Today badge."""
        return len(self.overdue) + len(self.due_today)

    @computed_field
    @property
    def progress(self) -> float:
        completed = len(self.completed)
        return _percentage(completed, self.pending_count + completed)


class UpcomingDay(BaseModel):
    """Incomplete tasks due on one calendar day, ordered by id."""

    model_config = ConfigDict(frozen=True)

    day: date
    tasks: list[Task]


class UpcomingView(BaseModel):
    """The next seven days, with one group per day that has tasks.

    Attributes:
        window: The fixed seven calendar days after today
        days: Non-empty day groups in ascending date order
    """

    model_config = ConfigDict(frozen=True)

    window: list[date]
    days: list[UpcomingDay]

    @property
    def tasks(self) -> list[Task]:
        return [task for day in self.days for task in day.tasks]

    @computed_field
    @property
    def total(self) -> int:
        return sum(len(day.tasks) for day in self.days)
