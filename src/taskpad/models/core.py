"""Task and project data models."""

import re
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_PRIORITY = 4
DEFAULT_PROJECT_COLOR = "#737373"

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _check_due_date(value: Any) -> date | None:
    """Accept only calendar dates or ``YYYY-MM-DD`` strings."""
    if value is None:
        return None
    if isinstance(value, datetime):
        raise ValueError("due date must not carry a time")
    if isinstance(value, date):
        return value
    if isinstance(value, str) and _ISO_DATE.fullmatch(value.strip()):
        return date.fromisoformat(value.strip())
    raise ValueError("due date must be a date or a YYYY-MM-DD string")


def _check_priority(value: Any) -> Any:
    # bool is an int subclass; pydantic would read True as 1
    if isinstance(value, bool):
        raise ValueError("priority must be an integer from 1 to 4")
    return value


def _require_text(value: str | None) -> str | None:
    """Strip surrounding whitespace and reject blank strings."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


def _reject_explicit_none(model: BaseModel, fields: tuple[str, ...]) -> None:
    for name in fields:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{name} cannot be cleared")


class Task(BaseModel):
    """Task record as held by the store.

    Attributes:
        id: Unique, never reused identifier
        title: Task title, never blank
        completed: Completion status
        project_id: Owning project, None for the implicit Inbox
        priority: Priority level (1=highest, 4=lowest)
        due_date: Calendar due date without a time component
        created_at: Creation timestamp
        completed_at: Completion timestamp, set iff completed
        order: Manual sort position within the task's project
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    completed: bool = False
    project_id: int | None = None
    priority: int = Field(default=DEFAULT_PRIORITY, ge=1, le=4)
    due_date: date | None = None
    created_at: datetime
    completed_at: datetime | None = None
    order: int = 0

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str | None) -> str | None:
        return _require_text(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def check_due_date(cls, value: Any) -> date | None:
        return _check_due_date(value)

    @field_validator("priority", mode="before")
    @classmethod
    def check_priority(cls, value: Any) -> Any:
        return _check_priority(value)

    @model_validator(mode="after")
    def completion_is_stamped(self) -> "Task":
        if self.completed != (self.completed_at is not None):
            raise ValueError("completed_at must be set exactly when completed is true")
        return self


class TaskCreate(BaseModel):
    """Model for creating a new task.

    Attributes:
        title: Task title (required, non-blank)
        project_id: Optional owning project
        priority: Priority level, defaults to 4 when omitted or None
        due_date: Optional calendar due date (date or "YYYY-MM-DD")
    """

    title: str
    project_id: int | None = None
    priority: int = Field(default=DEFAULT_PRIORITY, ge=1, le=4)
    due_date: date | None = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str | None) -> str | None:
        return _require_text(value)

    @field_validator("priority", mode="before")
    @classmethod
    def default_priority(cls, value: Any) -> Any:
        return DEFAULT_PRIORITY if value is None else _check_priority(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def check_due_date(cls, value: Any) -> date | None:
        return _check_due_date(value)


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    Only explicitly provided fields are merged. ``project_id`` and
    ``due_date`` may be set to None to clear them; ``id`` is ignored.
    """

    title: str | None = None
    completed: bool | None = None
    project_id: int | None = None
    priority: int | None = Field(default=None, ge=1, le=4)
    due_date: date | None = None
    order: int | None = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str | None) -> str | None:
        return _require_text(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def check_due_date(cls, value: Any) -> date | None:
        return _check_due_date(value)

    @field_validator("priority", mode="before")
    @classmethod
    def check_priority(cls, value: Any) -> Any:
        return _check_priority(value)

    @model_validator(mode="after")
    def non_nullable_fields(self) -> "TaskUpdate":
        _reject_explicit_none(self, ("title", "completed", "priority", "order"))
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller provided."""
        return self.model_dump(exclude_unset=True)


class Project(BaseModel):
    """Project record as held by the store.

    Attributes:
        id: Unique identifier
        name: Project name, never blank
        color: Display color token
        order: Sort position among projects
        is_collapsed: Whether the project is collapsed in navigation
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    color: str = DEFAULT_PROJECT_COLOR
    order: int = 0
    is_collapsed: bool = False

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str | None) -> str | None:
        return _require_text(value)


class ProjectCreate(BaseModel):
    """Model for creating a new project."""

    name: str
    color: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str | None) -> str | None:
        return _require_text(value)


class ProjectUpdate(BaseModel):
    """Model for updating an existing project. All fields are optional."""

    name: str | None = None
    color: str | None = None
    order: int | None = None
    is_collapsed: bool | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str | None) -> str | None:
        return _require_text(value)

    @model_validator(mode="after")
    def non_nullable_fields(self) -> "ProjectUpdate":
        _reject_explicit_none(self, ("name", "color", "order", "is_collapsed"))
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller provided."""
        return self.model_dump(exclude_unset=True)
