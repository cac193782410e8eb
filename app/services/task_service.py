"""Task lifecycle: creation, status changes, assignment, deletion, reads."""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, StorageError
from app.crud.task import task as task_crud
from app.database import atomic
from app.localization.helpers import get_translation
from app.models.task import Task, TaskStatus
from app.schemas.task import TaskCreate, TaskResponse
from app.services.projection_service import projection_service

logger = logging.getLogger(__name__)


class TaskService:
    """High-level task operations."""

    @staticmethod
    def _note_status(status: str) -> None:
        # Any status is stored; unusual ones are only worth a log line.
        if not TaskStatus.is_conventional(status):
            logger.info(f"Non-conventional task status stored: {status!r}")

    @staticmethod
    async def create_task(db: AsyncSession, *, task_in: TaskCreate) -> Task:
        """Insert a task; optional fields not supplied are stored as absent."""
        TaskService._note_status(task_in.status)
        async with atomic(db):
            new_task = await task_crud.create(db, obj_in=task_in)
        logger.info(f"Created task {new_task.id} in project {new_task.project_id}")
        return new_task

    @staticmethod
    async def update_status(db: AsyncSession, *, task_id: int, status: str) -> None:
        """Overwrite the status. No transition rules are enforced."""
        TaskService._note_status(status)
        async with atomic(db):
            await task_crud.set_fields(db, task_id=task_id, status=status)

    @staticmethod
    async def assign(db: AsyncSession, *, task_id: int, employee_id: str) -> None:
        """Overwrite the assignee; an empty string unassigns."""
        async with atomic(db):
            await task_crud.set_fields(db, task_id=task_id, empl_id=employee_id)
        logger.info(f"Assigned task {task_id} to {employee_id!r}")

    @staticmethod
    async def delete_task(db: AsyncSession, *, task_id: int) -> None:
        """Delete a task. Nothing depends on tasks, so nothing cascades."""
        async with atomic(db):
            await task_crud.remove(db, id=task_id)

    @staticmethod
    async def get_by_id(db: AsyncSession, *, task_id: int) -> TaskResponse:
        try:
            task_obj = await task_crud.get(db, task_id)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        if task_obj is None:
            raise NotFoundError(get_translation("errors.task_not_found", task_id=task_id))
        return projection_service.project_task(task_obj)

    @staticmethod
    async def list_by_project(db: AsyncSession, *, project_id: int) -> List[TaskResponse]:
        """All tasks of a project with the assignee avatar, if any."""
        try:
            rows = await task_crud.list_with_avatars(db, project_id=project_id)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        return [projection_service.project_task(task_obj, avatar) for task_obj, avatar in rows]


task_service = TaskService()
