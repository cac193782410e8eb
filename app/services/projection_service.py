"""Shape storage rows into wire payloads."""
from __future__ import annotations

import base64
from enum import Enum
from typing import List, Optional

from app.models.task import Task
from app.models.user import User
from app.schemas.task import TaskResponse
from app.schemas.user import UserResponse
from app.utils.nullable import normalize_optional_text


class AvatarEncoding(str, Enum):
    """How a read path exposes the stored avatar bytes."""

    RAW = "raw"
    BASE64 = "base64"


class ProjectionService:
    """Convert ORM rows into response schemas."""

    @staticmethod
    def encode_avatar(avatar: Optional[bytes], encoding: AvatarEncoding) -> bytes:
        """Apply the read-path encoding; a missing avatar is always empty."""
        raw = avatar or b""
        if encoding is AvatarEncoding.BASE64:
            return base64.b64encode(raw)
        return raw

    @staticmethod
    def project_task(task: Task, avatar: Optional[bytes] = None) -> TaskResponse:
        """Flatten a task, normalizing every optional text field."""
        return TaskResponse(
            id=task.id,
            name=task.name,
            descr=normalize_optional_text(task.descr),
            date=task.date,
            date_act=normalize_optional_text(task.date_act),
            empl_id=normalize_optional_text(task.empl_id),
            avatar=avatar or b"",
            project_id=task.project_id,
            status=task.status,
            priority=normalize_optional_text(task.priority),
        )

    @staticmethod
    def project_user(
        user: User,
        *,
        projects_ids: List[int],
        encoding: AvatarEncoding,
        login: str = "",
        password: str = "",
    ) -> UserResponse:
        """Build the user payload.

        Credentials are not read from the row: the caller decides what to echo
        (the login endpoint echoes the submitted pair, the profile endpoint
        blanks them).
        """
        return UserResponse(
            id=user.id,
            name=user.name,
            role=user.role,
            code=user.code,
            login=login,
            password=password,
            projects_ids=projects_ids,
            avatar=ProjectionService.encode_avatar(user.avatar, encoding),
        )


projection_service = ProjectionService()
