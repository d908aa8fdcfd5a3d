"""Unit tests for ProjectService using a mocked repository."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from taskpad.models import NotFoundError, Project
from taskpad.services.project_service import ProjectService


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.list_all = AsyncMock(return_value=[])
    repo.get = AsyncMock()
    repo.create = AsyncMock()
    repo.update = AsyncMock()
    repo.delete = AsyncMock(return_value=True)
    repo.toggle_collapse = AsyncMock()
    return repo


@pytest.fixture()
def service(mock_repo):
    return ProjectService(mock_repo)


@pytest.mark.asyncio
async def test_create_project_merges_mapping_and_kwargs(service, mock_repo):
    mock_repo.create.return_value = Project(id=1, name="Home")

    project = await service.create_project({"name": "Home"}, color="#3b82f6")

    assert project.name == "Home"
    mock_repo.create.assert_awaited_once_with({"name": "Home", "color": "#3b82f6"})


@pytest.mark.asyncio
async def test_require_project_raises_for_unknown_id(service, mock_repo):
    mock_repo.get.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        await service.require_project(4)

    assert str(exc_info.value) == "Project not found: 4"


@pytest.mark.asyncio
async def test_update_project_merges_fields(service, mock_repo):
    await service.update_project(1, {"name": "A"}, color="#000000")
    mock_repo.update.assert_awaited_once_with(1, {"name": "A", "color": "#000000"})


@pytest.mark.asyncio
async def test_delete_and_toggle_delegate(service, mock_repo):
    assert await service.delete_project(2) is True
    await service.toggle_collapse(2)

    mock_repo.delete.assert_awaited_once_with(2)
    mock_repo.toggle_collapse.assert_awaited_once_with(2)
