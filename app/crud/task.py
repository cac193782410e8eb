"""Task CRUD operations."""
from typing import List, Optional, Tuple

from sqlalchemy import String, cast, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.task import Task
from app.models.user import User
from app.schemas.task import TaskCreate


class CRUDTask(CRUDBase[Task, TaskCreate, dict]):
    """CRUD operations for Task."""

    async def list_with_avatars(
        self, db: AsyncSession, *, project_id: int
    ) -> List[Tuple[Task, Optional[bytes]]]:
        """Tasks of a project paired with the assignee avatar.

        LEFT OUTER JOIN, so unassigned tasks (or tasks whose ``empl_id`` does
        not match a user) are kept with a ``None`` avatar.
        """
        result = await db.execute(
            select(Task, User.avatar)
            .outerjoin(User, cast(User.id, String) == Task.empl_id)
            .where(Task.project_id == project_id)
            .order_by(Task.id)
        )
        return [(task, avatar) for task, avatar in result.all()]

    async def set_fields(self, db: AsyncSession, *, task_id: int, **values) -> int:
        result = await db.execute(
            update(Task)
            .where(Task.id == task_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    async def remove_by_project(self, db: AsyncSession, *, project_id: int) -> int:
        result = await db.execute(delete(Task).where(Task.project_id == project_id))
        return result.rowcount


task = CRUDTask(Task)
