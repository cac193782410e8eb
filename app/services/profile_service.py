"""Profile reads and avatar replacement."""
from __future__ import annotations

import base64
import binascii
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import NotFoundError, StorageError, ValidationError
from app.crud.user import user as user_crud
from app.database import atomic
from app.localization.helpers import get_translation
from app.schemas.user import UserResponse
from app.services.membership_service import membership_service
from app.services.projection_service import AvatarEncoding, projection_service

logger = logging.getLogger(__name__)


class ProfileService:
    """Read a user's profile and replace their avatar."""

    @staticmethod
    async def get_profile(
        db: AsyncSession,
        *,
        user_id: int,
        encoding: Optional[AvatarEncoding] = None,
    ) -> UserResponse:
        """Profile with login and password blanked.

        The avatar is left raw unless ``PROFILE_AVATAR_ENCODING`` says
        otherwise, unlike the login response which always re-encodes it.
        """
        if encoding is None:
            encoding = AvatarEncoding(settings.PROFILE_AVATAR_ENCODING)
        try:
            user_obj = await user_crud.get(db, user_id)
            if user_obj is None:
                raise NotFoundError(get_translation("errors.user_not_found", user_id=user_id))
            projects_ids = await membership_service.list_memberships(db, user_id=user_id)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

        return projection_service.project_user(
            user_obj,
            projects_ids=projects_ids,
            encoding=encoding,
        )

    @staticmethod
    async def update_avatar(db: AsyncSession, *, user_id: int, avatar_b64: str) -> None:
        """Decode base64 text and overwrite the stored avatar."""
        try:
            avatar = base64.b64decode(avatar_b64, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError(str(exc)) from exc

        async with atomic(db):
            await user_crud.set_avatar(db, user_id=user_id, avatar=avatar)
        logger.info(f"Updated avatar of user {user_id} ({len(avatar)} bytes)")


profile_service = ProfileService()
