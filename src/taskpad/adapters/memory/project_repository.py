"""In-memory implementation of ProjectRepository."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from taskpad.models import DEFAULT_PROJECT_COLOR, Project, ProjectCreate, ProjectUpdate
from taskpad.repositories import ProjectRepository

from .base import InMemoryStore, build_record, validate_input

logger = logging.getLogger(__name__)


class InMemoryProjectRepository(InMemoryStore[Project], ProjectRepository):
    """In-memory project store."""

    entity = "Project"

    async def list_all(self) -> list[Project]:
        async with self._operation():
            projects = self.snapshot()
        return sorted(projects, key=lambda p: (p.order, p.id))

    async def get(self, project_id: int) -> Project | None:
        async with self._operation():
            return self._records.get(project_id)

    async def create(self, project_data: ProjectCreate | Mapping[str, Any]) -> Project:
        data = validate_input(ProjectCreate, project_data)
        async with self._operation():
            project = build_record(
                Project,
                {
                    "id": self._next_id,
                    "name": data.name,
                    "color": data.color or DEFAULT_PROJECT_COLOR,
                    "order": len(self._records),
                },
            )
            self._put(project, allocated=True)
        logger.debug("Project created id=%s name=%r", project.id, project.name)
        return project

    async def update(
        self, project_id: int, updates: ProjectUpdate | Mapping[str, Any]
    ) -> Project:
        if isinstance(updates, Mapping):
            updates = {k: v for k, v in updates.items() if k != "id"}
        changes = validate_input(ProjectUpdate, updates).changes()
        async with self._operation():
            current = self._require(project_id)
            project = build_record(Project, {**current.model_dump(), **changes})
            self._put(project)
        logger.debug("Project updated id=%s fields=%s", project_id, sorted(changes))
        return project

    async def delete(self, project_id: int) -> bool:
        async with self._operation():
            self._remove(project_id)
        logger.debug("Project deleted id=%s", project_id)
        return True

    async def toggle_collapse(self, project_id: int) -> Project:
        async with self._operation():
            current = self._require(project_id)
            project = current.model_copy(update={"is_collapsed": not current.is_collapsed})
            self._put(project)
        logger.debug(
            "Project collapse toggled id=%s is_collapsed=%s", project_id, project.is_collapsed
        )
        return project
