"""Profile API endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.localization.helpers import get_translation
from app.schemas.common import MessageResponse
from app.schemas.user import AvatarUpdate, UserEnvelope
from app.services.membership_service import membership_service
from app.services.profile_service import profile_service

router = APIRouter()


@router.get("/{user_id}", response_model=UserEnvelope)
async def get_profile(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a user's profile."""
    return UserEnvelope(user=await profile_service.get_profile(db, user_id=user_id))


@router.post("/{user_id}/updateAvatar", response_model=MessageResponse)
async def update_avatar(
    user_id: int,
    payload: AvatarUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Replace the avatar with a base64 encoded image."""
    await profile_service.update_avatar(db, user_id=user_id, avatar_b64=payload.avatar)
    return MessageResponse(message=get_translation("messages.avatar_updated"))


@router.post("/{user_id}/addProject", response_model=MessageResponse)
async def add_project(
    user_id: int,
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Add a project to the user's membership set."""
    await membership_service.add_membership(db, user_id=user_id, project_id=project_id)
    return MessageResponse(message=get_translation("messages.membership_added"))


@router.delete("/{user_id}/removeProject", response_model=MessageResponse)
async def remove_project(
    user_id: int,
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Remove a project from the user's membership set."""
    await membership_service.remove_membership(db, user_id=user_id, project_id=project_id)
    return MessageResponse(message=get_translation("messages.membership_removed"))
