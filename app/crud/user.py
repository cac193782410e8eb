"""User and membership CRUD operations."""
from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.user import User, UserProject
from app.schemas.user import UserCreate


class CRUDUser(CRUDBase[User, UserCreate, dict]):
    """CRUD operations for User."""

    async def get_by_credentials(
        self, db: AsyncSession, *, login: str, password: str
    ) -> Optional[User]:
        """Plaintext match on both columns; first row wins."""
        result = await db.execute(
            select(User)
            .where(User.login == login, User.password == password)
            .order_by(User.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def count_by_login(self, db: AsyncSession, *, login: str) -> int:
        result = await db.execute(select(func.count()).select_from(User).where(User.login == login))
        return result.scalar_one()

    async def set_avatar(self, db: AsyncSession, *, user_id: int, avatar: bytes) -> int:
        result = await db.execute(
            update(User)
            .where(User.id == user_id)
            .values(avatar=avatar)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount


class CRUDMembership(CRUDBase[UserProject, dict, dict]):
    """Rows of the user -> project membership relation."""

    async def list_project_ids(self, db: AsyncSession, *, user_id: int) -> List[int]:
        result = await db.execute(
            select(UserProject.project_id)
            .where(UserProject.user_id == user_id)
            .order_by(UserProject.id)
        )
        return list(result.scalars().all())

    async def remove_for_user(self, db: AsyncSession, *, user_id: int, project_id: int) -> int:
        result = await db.execute(
            delete(UserProject).where(
                UserProject.user_id == user_id,
                UserProject.project_id == project_id,
            )
        )
        return result.rowcount

    async def remove_for_project(self, db: AsyncSession, *, project_id: int) -> int:
        result = await db.execute(delete(UserProject).where(UserProject.project_id == project_id))
        return result.rowcount


user = CRUDUser(User)
membership = CRUDMembership(UserProject)
