"""Project creation, lookup and cascading deletion."""
from __future__ import annotations

import logging
from typing import Dict, Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, StorageError
from app.crud.project import project as project_crud
from app.crud.task import task as task_crud
from app.database import atomic
from app.localization.helpers import get_translation
from app.models.project import Project
from app.services.membership_service import membership_service

logger = logging.getLogger(__name__)


class ProjectService:
    """High-level project operations."""

    @staticmethod
    async def create_project(db: AsyncSession, *, name: str) -> Project:
        async with atomic(db):
            new_project = await project_crud.create(db, obj_in={"name": name})
        logger.info(f"Created project {new_project.id}")
        return new_project

    @staticmethod
    async def get_names(db: AsyncSession, *, ids: Iterable[int]) -> Dict[int, str]:
        """Map each id to its project name; any unknown id fails the lookup."""
        names: Dict[int, str] = {}
        for project_id in ids:
            try:
                name = await project_crud.get_name(db, id=project_id)
            except SQLAlchemyError as exc:
                raise StorageError(str(exc)) from exc
            if name is None:
                raise NotFoundError(
                    get_translation("errors.project_not_found", project_id=project_id)
                )
            names[project_id] = name
        return names

    @staticmethod
    async def delete_project(db: AsyncSession, *, project_id: int) -> Dict[str, int]:
        """Delete a project with its tasks and every membership entry.

        The three deletions share one transaction, so no reader sees a
        half-removed project. Unknown ids delete nothing and do not fail.
        """
        async with atomic(db):
            tasks_removed = await task_crud.remove_by_project(db, project_id=project_id)
            memberships_removed = await membership_service.cascade_remove_project(
                db, project_id=project_id
            )
            projects_removed = await project_crud.remove(db, id=project_id)
        logger.info(
            f"Deleted project {project_id}: tasks={tasks_removed}, "
            f"memberships={memberships_removed}, projects={projects_removed}"
        )
        return {
            "tasks": tasks_removed,
            "memberships": memberships_removed,
            "projects": projects_removed,
        }


project_service = ProjectService()
