"""Projects API endpoints."""
import re
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError
from app.database import get_db
from app.localization.helpers import get_translation
from app.schemas.common import MessageResponse
from app.schemas.project import ProjectCreate, ProjectNamesResponse
from app.schemas.task import TaskListResponse
from app.services.project_service import project_service
from app.services.task_service import task_service

router = APIRouter()

ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_ids(raw: str) -> List[int]:
    """Parse a comma separated id list; any non-integer item is rejected."""
    ids = []
    for item in raw.split(","):
        if not ID_PATTERN.fullmatch(item):
            raise ValidationError(get_translation("errors.invalid_id"))
        ids.append(int(item))
    return ids


@router.get("/", response_model=ProjectNamesResponse)
async def project_names(
    ids: str = "",
    db: AsyncSession = Depends(get_db),
):
    """Names of the requested projects, keyed by id."""
    names = await project_service.get_names(db, ids=parse_ids(ids))
    return ProjectNamesResponse(projects=names)


@router.get("/{project_id}/tasks", response_model=TaskListResponse)
async def project_tasks(
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Tasks of a project with assignee avatars."""
    tasks = await task_service.list_by_project(db, project_id=project_id)
    return TaskListResponse(tasks=tasks)


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a project, its tasks and its memberships."""
    await project_service.delete_project(db, project_id=project_id)
    return MessageResponse(message=get_translation("messages.project_deleted"))


@router.post("/new", response_model=MessageResponse)
async def create_project(
    payload: ProjectCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a project."""
    await project_service.create_project(db, name=payload.name)
    return MessageResponse(message=get_translation("messages.project_added"))
