"""Tests for the output formatters."""

from datetime import date

import pytest

from taskpad.utils.ui import formatters
from taskpad.utils.ui.formatters import (
    TASK_COLUMNS,
    format_due_date,
    format_output,
    format_task_item,
    is_overdue,
)

TODAY = date(2024, 6, 10)


def _task(task_id, title, **fields):
    return {
        "id": task_id,
        "title": title,
        "completed": False,
        "project_id": None,
        "priority": 4,
        "due_date": None,
        "created_at": "2024-06-10T09:30:00Z",
        "completed_at": None,
        "order": 0,
        **fields,
    }


@pytest.fixture()
def narrow_console(monkeypatch):
    """Render at the default 80 columns whatever the real terminal is."""
    monkeypatch.setattr(formatters.console, "width", 80)


def test_task_table_uses_fixed_columns(narrow_console, capsys):
    view = {
        "overdue": [_task(2, "Book dentist appointment", due_date="2024-06-09")],
        "due_today": [_task(4, "Reply to design feedback", priority=2, due_date="2024-06-10")],
        "completed": [],
    }

    format_output(view, "table")

    out = capsys.readouterr().out
    for header in ("Id", "Title", "Priority", "Due Date", "Completed"):
        assert header in out
    assert "Created At" not in out
    assert "Book dentist appointment" in out
    assert "Reply to design feedback" in out
    assert "2024-06-10" in out


def test_task_columns_are_a_subset_of_task_fields():
    assert set(TASK_COLUMNS) <= set(_task(1, "x"))


def test_project_table_keeps_every_key(narrow_console, capsys):
    format_output({"projects": [{"id": 1, "name": "Home", "color": "#3b82f6"}]}, "table")

    out = capsys.readouterr().out
    assert "Name" in out
    assert "#3b82f6" in out


@pytest.mark.parametrize(
    ("due", "label"),
    [
        (date(2024, 6, 10), "Today"),
        (date(2024, 6, 11), "Tomorrow"),
        (date(2024, 6, 9), "Yesterday"),
        (date(2024, 6, 14), "Friday"),
        (date(2024, 6, 20), "20 Jun"),
        (date(2025, 1, 3), "03 Jan 2025"),
    ],
)
def test_format_due_date_is_relative_to_given_day(due, label):
    assert format_due_date(due, TODAY) == label


def test_is_overdue():
    assert is_overdue(date(2024, 6, 9), TODAY) is True
    assert is_overdue(TODAY, TODAY) is False


def test_task_item_without_reference_day_shows_iso_date(capsys):
    format_task_item(_task(7, "Write release notes", due_date="2024-06-13"))

    out = capsys.readouterr().out
    assert "Write release notes · 2024-06-13" in out


def test_task_item_with_reference_day_shows_label(capsys):
    format_task_item(_task(7, "Write release notes", due_date="2024-06-11"), today=TODAY)

    assert "Write release notes · Tomorrow" in capsys.readouterr().out
