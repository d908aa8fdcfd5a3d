"""Classify tasks into date buckets relative to a reference "now".

Due dates are calendar dates, so every comparison here is date against date;
the time of day in ``now`` never matters, only its calendar date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import StrEnum

from taskpad.models import Task

UPCOMING_DAYS = 7


class Bucket(StrEnum):
    """Date bucket of a task relative to today."""

    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    UPCOMING = "upcoming"
    NO_DUE_DATE = "no_due_date"
    LATER = "later"  # due after the upcoming window; shown in no date view
    NOT_APPLICABLE = "not_applicable"  # completed tasks


@dataclass(frozen=True)
class Classification:
    bucket: Bucket
    day: date | None = None


def today_of(now: date | datetime) -> date:
    """Return the calendar date of ``now``."""
    if isinstance(now, datetime):
        return now.date()
    return now


def upcoming_window(now: date | datetime) -> list[date]:
    """The fixed seven days after today, inclusive of today + 7."""
    today = today_of(now)
    return [today + timedelta(days=offset) for offset in range(1, UPCOMING_DAYS + 1)]


def classify(task: Task, now: date | datetime) -> Classification:
    """Map a task's due date and completion state to its bucket.

    Args:
        task: Task to classify
        now: Reference time; only its calendar date is used

    Returns:
        Classification carrying the bucket and, for dated buckets, the due date
    """
    if task.completed:
        return Classification(Bucket.NOT_APPLICABLE, task.due_date)
    if task.due_date is None:
        return Classification(Bucket.NO_DUE_DATE)

    today = today_of(now)
    due = task.due_date
    if due < today:
        return Classification(Bucket.OVERDUE, due)
    if due == today:
        return Classification(Bucket.DUE_TODAY, due)
    if due <= today + timedelta(days=UPCOMING_DAYS):
        return Classification(Bucket.UPCOMING, due)
    return Classification(Bucket.LATER, due)


def priority_key(task: Task) -> tuple[int, int]:
    """Sort key for Overdue and DueToday: priority first (1 before 4), then id."""
    return (task.priority, task.id)


def upcoming_key(task: Task) -> tuple[date, int]:
    """Sort key for Upcoming: due date, then id."""
    return (task.due_date or date.max, task.id)
