"""User <-> project membership management."""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.crud.user import membership, user
from app.database import atomic
from app.localization.helpers import get_translation

logger = logging.getLogger(__name__)


class MembershipService:
    """Maintain each user's set of project ids.

    The set is stored as rows of ``user_projects``. Duplicates are allowed:
    adding a project twice records it twice, and removing it drops every
    occurrence.
    """

    @staticmethod
    async def list_memberships(db: AsyncSession, *, user_id: int) -> List[int]:
        """Project ids of a user in the order they were added."""
        return await membership.list_project_ids(db, user_id=user_id)

    @staticmethod
    async def add_membership(db: AsyncSession, *, user_id: int, project_id: int) -> List[int]:
        """Append ``project_id`` to the user's set and return the new set."""
        async with atomic(db):
            if await user.get(db, user_id) is None:
                raise NotFoundError(get_translation("errors.user_not_found", user_id=user_id))
            await membership.create(db, obj_in={"user_id": user_id, "project_id": project_id})
        logger.info(f"Added project {project_id} to user {user_id}")
        return await membership.list_project_ids(db, user_id=user_id)

    @staticmethod
    async def remove_membership(db: AsyncSession, *, user_id: int, project_id: int) -> int:
        """Drop every occurrence of ``project_id``; a non-member is a no-op."""
        async with atomic(db):
            removed = await membership.remove_for_user(db, user_id=user_id, project_id=project_id)
        logger.info(f"Removed project {project_id} from user {user_id} ({removed} entries)")
        return removed

    @staticmethod
    async def cascade_remove_project(db: AsyncSession, *, project_id: int) -> int:
        """Remove ``project_id`` from every user's set.

        Does not commit; runs inside the caller's transaction.
        """
        return await membership.remove_for_project(db, project_id=project_id)


membership_service = MembershipService()
