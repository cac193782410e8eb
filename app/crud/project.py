"""Project CRUD operations."""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.project import Project
from app.schemas.project import ProjectCreate


class CRUDProject(CRUDBase[Project, ProjectCreate, dict]):
    """CRUD operations for Project."""

    async def get_name(self, db: AsyncSession, *, id: int) -> Optional[str]:
        result = await db.execute(select(Project.name).where(Project.id == id))
        return result.scalar_one_or_none()


project = CRUDProject(Project)
