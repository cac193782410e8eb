"""Model modules."""
from app.models.user import User, UserProject
from app.models.project import Project
from app.models.task import Task, TaskStatus

__all__ = [
    "User",
    "UserProject",
    "Project",
    "Task",
    "TaskStatus",
]
