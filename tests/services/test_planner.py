"""End-to-end tests of the Planner request API over the in-memory store."""

from __future__ import annotations

from datetime import date, timedelta
from unittest.mock import patch

import pytest

from taskpad.models import NotFoundError, ValidationError
from taskpad.services.planner import Planner, get_planner


# ---------------------------------------------------------------------------
# Views over the seed data (today is Monday 2024-06-10)
# ---------------------------------------------------------------------------


class TestSeededViews:
    @pytest.mark.asyncio
    async def test_inbox(self, seeded_planner):
        view = await seeded_planner.list_inbox()
        assert [t.id for t in view.tasks] == [10, 1]

    @pytest.mark.asyncio
    async def test_today(self, seeded_planner):
        view = await seeded_planner.list_today()

        assert [t.id for t in view.overdue] == [2]
        assert [t.id for t in view.due_today] == [3, 4]
        assert [t.id for t in view.completed] == [5]
        assert view.progress == 25.0
        assert await seeded_planner.today_count() == 3

    @pytest.mark.asyncio
    async def test_upcoming(self, seeded_planner):
        view = await seeded_planner.list_upcoming()

        assert [(d.day, [t.id for t in d.tasks]) for d in view.days] == [
            (date(2024, 6, 11), [6]),
            (date(2024, 6, 13), [7]),
            (date(2024, 6, 16), [8]),
        ]

    @pytest.mark.asyncio
    async def test_project_view(self, seeded_planner):
        view = await seeded_planner.list_by_project(2)

        assert view.project.name == "Work"
        assert [t.id for t in view.tasks] == [3, 4, 7]

    @pytest.mark.asyncio
    async def test_project_task_counts(self, seeded_planner):
        assert await seeded_planner.project_task_counts() == {1: 2, 2: 3, 3: 2}

    @pytest.mark.asyncio
    async def test_explicit_now_overrides_clock(self, seeded_planner, now):
        view = await seeded_planner.list_today(now + timedelta(days=1))
        assert [t.id for t in view.due_today] == [6]


# ---------------------------------------------------------------------------
# Task requests
# ---------------------------------------------------------------------------


class TestTaskRequests:
    @pytest.mark.asyncio
    async def test_created_task_appears_in_inbox(self, planner):
        task = await planner.create_task({"title": "Loose end"})

        assert [t.id for t in (await planner.list_inbox()).tasks] == [task.id]
        assert await planner.get_task(task.id) == task

    @pytest.mark.asyncio
    async def test_quick_add_sets_due_date_from_title(self, planner):
        task = await planner.quick_add("  Call mom tomorrow  ")

        assert task.title == "Call mom tomorrow"
        assert task.due_date == date(2024, 6, 11)
        assert [t.id for t in (await planner.list_upcoming()).tasks] == [task.id]

    @pytest.mark.asyncio
    async def test_quick_add_blank_title_raises(self, planner):
        with pytest.raises(ValidationError):
            await planner.quick_add("   ")

    @pytest.mark.asyncio
    async def test_update_moves_task_between_views(self, planner):
        task = await planner.create_task({"title": "Drift", "due_date": "2024-06-10"})
        assert (await planner.list_today()).pending_count == 1

        await planner.update_task(task.id, {"due_date": "2024-06-12"})

        assert (await planner.list_today()).pending_count == 0
        assert (await planner.list_upcoming()).total == 1

    @pytest.mark.asyncio
    async def test_complete_then_reopen(self, planner):
        task = await planner.create_task({"title": "Ship", "due_date": "2024-06-10"})

        await planner.complete_task(task.id)
        today = await planner.list_today()
        assert [t.id for t in today.completed] == [task.id]
        assert today.pending_count == 0

        reopened = await planner.reopen_task(task.id)
        assert reopened.completed_at is None
        assert (await planner.list_today()).pending_count == 1

    @pytest.mark.asyncio
    async def test_delete_unknown_raises_not_found(self, planner):
        with pytest.raises(NotFoundError):
            await planner.delete_task(1)

    @pytest.mark.asyncio
    async def test_get_unknown_task_raises_not_found(self, planner):
        with pytest.raises(NotFoundError):
            await planner.get_task(1)

    @pytest.mark.asyncio
    async def test_reorder_inbox(self, planner):
        first = await planner.create_task({"title": "first"})
        second = await planner.create_task({"title": "second"})

        assert await planner.reorder_tasks(None, [second.id, first.id]) is True

        assert (await planner.get_task(second.id)).order == 0
        assert (await planner.get_task(first.id)).order == 1


# ---------------------------------------------------------------------------
# Project requests
# ---------------------------------------------------------------------------


class TestProjectRequests:
    @pytest.mark.asyncio
    async def test_create_update_and_collapse(self, planner):
        project = await planner.create_project({"name": "Garden"})
        assert (await planner.list_projects()) == [project]

        renamed = await planner.update_project(project.id, {"name": "Allotment"})
        assert renamed.name == "Allotment"

        collapsed = await planner.toggle_project_collapse(project.id)
        assert collapsed.is_collapsed is True
        assert (await planner.get_project(project.id)).is_collapsed is True

    @pytest.mark.asyncio
    async def test_unknown_project_view_raises(self, planner):
        with pytest.raises(NotFoundError):
            await planner.list_by_project(7)

    @pytest.mark.asyncio
    async def test_delete_project_keeps_its_tasks(self, seeded_planner):
        await seeded_planner.delete_project(2)

        task = await seeded_planner.get_task(3)
        assert task.project_id == 2
        assert 3 not in {t.id for t in (await seeded_planner.list_inbox()).tasks}
        assert 3 in {t.id for t in (await seeded_planner.list_today()).due_today}
        with pytest.raises(NotFoundError):
            await seeded_planner.list_by_project(2)


@pytest.mark.asyncio
async def test_create_calls_go_through_the_services(planner):
    with patch.object(
        planner.tasks, "add_task", wraps=planner.tasks.add_task
    ) as add_task, patch.object(
        planner.projects, "create_project", wraps=planner.projects.create_project
    ) as create_project:
        project = await planner.create_project({"name": "Errands"})
        task = await planner.create_task({"title": "Post parcel", "project_id": project.id})

    add_task.assert_awaited_once_with({"title": "Post parcel", "project_id": project.id})
    create_project.assert_awaited_once_with({"name": "Errands"})
    assert (await planner.list_by_project(project.id)).tasks == [task]


def test_get_planner_builds_from_config():
    from taskpad.config import get_config_manager

    get_config_manager().set("storage.backend", "memory")

    planner = get_planner()

    assert isinstance(planner, Planner)
    assert planner.strategy.storage_type == "memory"


def test_get_planner_uses_configured_timezone():
    with patch("taskpad.services.planner.make_clock") as make_clock:
        get_planner()
    make_clock.assert_called_once_with(None)
