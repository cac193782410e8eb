"""Tasks API endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.localization.helpers import get_translation
from app.schemas.common import MessageResponse
from app.schemas.task import TaskCreate, TaskEnvelope, TaskStatusUpdate
from app.services.task_service import task_service

router = APIRouter()


@router.post("/new", response_model=MessageResponse)
async def create_task(
    task_in: TaskCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a task."""
    await task_service.create_task(db, task_in=task_in)
    return MessageResponse(message=get_translation("messages.task_added"))


@router.get("/{task_id}", response_model=TaskEnvelope)
async def get_task(
    task_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a task by ID."""
    return TaskEnvelope(task=await task_service.get_by_id(db, task_id=task_id))


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a task."""
    await task_service.delete_task(db, task_id=task_id)
    return MessageResponse(message=get_translation("messages.task_deleted"))


@router.post("/{task_id}/updateStatus", response_model=MessageResponse)
async def update_status(
    task_id: int,
    payload: TaskStatusUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Overwrite the task status."""
    await task_service.update_status(db, task_id=task_id, status=payload.status)
    return MessageResponse(message=get_translation("messages.task_status_updated"))


@router.post("/{task_id}/assign", response_model=MessageResponse)
async def assign_task(
    task_id: int,
    empl_id: str = "",
    db: AsyncSession = Depends(get_db),
):
    """Assign the task to an employee; an empty ``empl_id`` unassigns."""
    await task_service.assign(db, task_id=task_id, employee_id=empl_id)
    return MessageResponse(message=get_translation("messages.task_assigned"))
