"""Project service - Business logic for project operations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from taskpad.models import NotFoundError, Project
from taskpad.repositories import ProjectRepository


class ProjectService:
    """Service for project business logic.

    This service encapsulates business rules and orchestrates project operations
    using the project repository.
    """

    def __init__(self, project_repository: ProjectRepository):
        """Initialize the project service.

        Args:
            project_repository: ProjectRepository implementation for data access
        """
        self.repository = project_repository

    async def list_projects(self) -> list[Project]:
        """List projects ordered by their sort position."""
        return await self.repository.list_all()

    async def require_project(self, project_id: int) -> Project:
        """Get a project by ID.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.repository.get(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        return project

    async def create_project(
        self,
        fields: Mapping[str, Any] | None = None,
        **values: Any,
    ) -> Project:
        """Create a new project.

        Args:
            fields: Mapping with ``name`` (required) and optionally ``color``,
                which defaults to neutral grey
            **values: Fields merged over ``fields``

        Returns:
            Created Project object
        """
        return await self.repository.create({**(fields or {}), **values})

    async def update_project(
        self,
        project_id: int,
        updates: Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> Project:
        """Update an existing project.

        Args:
            project_id: Project ID to update
            updates: Mapping of fields to update
            **fields: Fields to update, merged over ``updates``

        Returns:
            Updated Project object
        """
        return await self.repository.update(project_id, {**(updates or {}), **fields})

    async def delete_project(self, project_id: int) -> bool:
        """Delete a project.

        Tasks of the project are not deleted or moved; they keep their
        ``project_id``.
        """
        return await self.repository.delete(project_id)

    async def toggle_collapse(self, project_id: int) -> Project:
        """Flip the collapsed state of a project."""
        return await self.repository.toggle_collapse(project_id)
