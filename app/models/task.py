"""Task model."""
from enum import Enum

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from app.database import Base


class TaskStatus(str, Enum):
    """Conventional task statuses.

    Storage accepts any string; these are the values clients use in practice.
    """

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @classmethod
    def is_conventional(cls, value: str) -> bool:
        return value in cls._value2member_map_


class Task(Base):
    """Task model.

    ``descr``, ``date_act``, ``empl_id`` and ``priority`` are nullable: NULL
    means absent, which is distinct from an empty string.
    """

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    descr = Column(Text, nullable=True)
    date = Column(String(64), nullable=False)
    date_act = Column(String(64), nullable=True)
    empl_id = Column(String(64), nullable=True, index=True)  # users.id as text, not enforced
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(50), nullable=False, index=True)
    priority = Column(String(50), nullable=True)
