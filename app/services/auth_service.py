"""Registration and login."""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AuthenticationError, StorageError
from app.crud.user import membership, user as user_crud
from app.database import atomic
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse
from app.services.projection_service import AvatarEncoding, projection_service

logger = logging.getLogger(__name__)


class AuthService:
    """Authentication service.

    Credentials are stored and compared as plaintext. That is insecure and is
    kept only for compatibility with existing clients and data; switching to
    salted hashes is a product decision.
    """

    @staticmethod
    async def register(db: AsyncSession, user_in: UserCreate) -> User:
        """Insert a new user. Login uniqueness is not enforced here."""
        async with atomic(db):
            new_user = await user_crud.create(db, obj_in=user_in)
        logger.info(f"Registered user {new_user.id}")
        return new_user

    @staticmethod
    async def login_exists(db: AsyncSession, login: str) -> bool:
        try:
            return await user_crud.count_by_login(db, login=login) > 0
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    @staticmethod
    async def authenticate_user(db: AsyncSession, login: str, password: str) -> UserResponse:
        """Return the matching user with the submitted credentials echoed back.

        The avatar is re-encoded to base64 text on this path.
        """
        try:
            user = await user_crud.get_by_credentials(db, login=login, password=password)
            if user is None:
                raise AuthenticationError()
            projects_ids = await membership.list_project_ids(db, user_id=user.id)
        except SQLAlchemyError as exc:
            logger.error(f"Login lookup failed: {exc}", exc_info=True)
            raise StorageError(str(exc)) from exc

        return projection_service.project_user(
            user,
            projects_ids=projects_ids,
            encoding=AvatarEncoding.BASE64,
            login=login,
            password=password,
        )
