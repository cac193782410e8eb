"""Authentication API endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.localization.helpers import get_translation
from app.schemas.auth import LoginRequest
from app.schemas.common import MessageResponse
from app.schemas.user import UserCreate, UserEnvelope
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("/login", response_model=UserEnvelope)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """Login with plaintext credentials; returns the user record."""
    user = await AuthService.authenticate_user(db, credentials.login, credentials.password)
    return UserEnvelope(user=user)


@router.post("/register", response_model=MessageResponse)
async def register(
    user_in: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """Register a new user."""
    await AuthService.register(db, user_in)
    return MessageResponse(message=get_translation("messages.user_registered"))


@router.get("/register/check/{login}", response_model=MessageResponse)
async def check_login(
    login: str,
    db: AsyncSession = Depends(get_db),
):
    """Tell whether a login is already taken."""
    if await AuthService.login_exists(db, login):
        return MessageResponse(message=get_translation("messages.login_exists"))
    return MessageResponse(message=get_translation("messages.login_free"))
