"""Schema modules."""
from app.schemas.auth import LoginRequest
from app.schemas.user import UserCreate, UserResponse, UserEnvelope, AvatarUpdate
from app.schemas.project import ProjectCreate, ProjectNamesResponse
from app.schemas.task import TaskCreate, TaskStatusUpdate, TaskResponse, TaskEnvelope, TaskListResponse
from app.schemas.common import MessageResponse, ErrorResponse
