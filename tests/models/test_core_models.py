"""Tests for task/project models and the view result models."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pydantic
import pytest

from taskpad.models import (
    DEFAULT_PRIORITY,
    DEFAULT_PROJECT_COLOR,
    NotFoundError,
    Project,
    ProjectUpdate,
    Task,
    TaskCreate,
    TaskListView,
    TaskUpdate,
    TodayView,
    UpcomingDay,
    UpcomingView,
)

CREATED = datetime(2024, 6, 1, 8, 0, tzinfo=timezone.utc)


def _task(task_id: int, **fields) -> Task:
    return Task(id=task_id, title=fields.pop("title", f"Task {task_id}"), created_at=CREATED, **fields)


class TestTask:
    def test_defaults(self):
        task = _task(1)
        assert task.completed is False
        assert task.priority == DEFAULT_PRIORITY
        assert task.project_id is None
        assert task.due_date is None
        assert task.completed_at is None

    def test_title_is_stripped(self):
        assert _task(1, title="  Buy milk  ").title == "Buy milk"

    def test_blank_title_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            _task(1, title="   ")

    @pytest.mark.parametrize("priority", [0, 5])
    def test_priority_out_of_range_rejected(self, priority):
        with pytest.raises(pydantic.ValidationError):
            _task(1, priority=priority)

    def test_completed_requires_completed_at(self):
        with pytest.raises(pydantic.ValidationError):
            _task(1, completed=True)

    def test_completed_at_requires_completed(self):
        with pytest.raises(pydantic.ValidationError):
            _task(1, completed_at=CREATED)

    def test_records_are_frozen(self):
        task = _task(1)
        with pytest.raises(pydantic.ValidationError):
            task.title = "changed"

    def test_due_date_serialises_as_iso_date(self):
        task = _task(1, due_date=date(2024, 6, 12))
        assert task.model_dump(mode="json")["due_date"] == "2024-06-12"


class TestTaskCreate:
    def test_none_priority_means_default(self):
        assert TaskCreate(title="x", priority=None).priority == DEFAULT_PRIORITY

    def test_iso_due_date_string_accepted(self):
        assert TaskCreate(title="x", due_date="2024-06-12").due_date == date(2024, 6, 12)

    def test_unparseable_due_date_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            TaskCreate(title="x", due_date="someday")

    def test_missing_title_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            TaskCreate()


class TestTaskUpdate:
    def test_changes_only_contains_provided_fields(self):
        update = TaskUpdate(title="New", due_date=None)
        assert update.changes() == {"title": "New", "due_date": None}

    def test_project_id_can_be_cleared(self):
        assert TaskUpdate(project_id=None).changes() == {"project_id": None}

    @pytest.mark.parametrize("field", ["title", "completed", "priority", "order"])
    def test_non_nullable_fields_reject_none(self, field):
        with pytest.raises(pydantic.ValidationError):
            TaskUpdate(**{field: None})

    def test_unknown_fields_ignored(self):
        assert TaskUpdate.model_validate({"colour": "red"}).changes() == {}


class TestProject:
    def test_default_color(self):
        assert Project(id=1, name="Home").color == DEFAULT_PROJECT_COLOR

    def test_blank_name_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Project(id=1, name="")

    def test_update_rejects_clearing_color(self):
        with pytest.raises(pydantic.ValidationError):
            ProjectUpdate(color=None)


class TestViews:
    def test_task_list_progress(self):
        view = TaskListView(
            tasks=[
                _task(1),
                _task(2, completed=True, completed_at=CREATED),
                _task(3),
            ]
        )
        assert [t.id for t in view.incomplete] == [1, 3]
        assert [t.id for t in view.completed] == [2]
        assert view.progress == 33.3

    def test_empty_list_progress_is_zero(self):
        assert TaskListView(tasks=[]).progress == 0.0

    def test_today_counts(self):
        done = _task(3, completed=True, completed_at=CREATED)
        view = TodayView(overdue=[_task(1)], due_today=[_task(2)], completed=[done])
        assert view.pending_count == 2
        assert view.progress == 33.3
        assert [t.id for t in view.tasks] == [1, 2, 3]

    def test_today_dump_includes_computed_fields(self):
        dumped = TodayView(overdue=[], due_today=[], completed=[]).model_dump()
        assert dumped["pending_count"] == 0
        assert dumped["progress"] == 0.0

    def test_upcoming_total(self):
        view = UpcomingView(
            window=[date(2024, 6, 11)],
            days=[UpcomingDay(day=date(2024, 6, 11), tasks=[_task(1), _task(2)])],
        )
        assert view.total == 2
        assert [t.id for t in view.tasks] == [1, 2]


def test_not_found_error_carries_entity_and_id():
    error = NotFoundError("Task", 42)
    assert error.entity == "Task"
    assert error.entity_id == 42
    assert str(error) == "Task not found: 42"
