"""Task schemas."""
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_serializer, field_validator

from app.schemas.common import decode_binary, encode_binary


class TaskCreate(BaseModel):
    """Task creation schema.

    Optional fields left out of the payload stay ``None`` and are stored as
    absent, never as an empty string.
    """

    name: str
    date: str
    project_id: int = Field(alias="projectId")
    status: str
    descr: Optional[str] = None
    date_act: Optional[str] = None
    empl_id: Optional[str] = None
    priority: Optional[str] = None

    class Config:
        populate_by_name = True

    @field_validator("empl_id", mode="before")
    @classmethod
    def _empl_id_as_text(cls, value: Union[int, str, None]) -> Optional[str]:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class TaskStatusUpdate(BaseModel):
    """New status; any string is accepted."""

    status: str


class TaskResponse(BaseModel):
    """Task as returned on the wire, with optional fields flattened to text."""

    id: int
    name: str
    descr: str = ""
    date: str
    date_act: str = ""
    empl_id: str = ""
    avatar: bytes = b""
    project_id: int = Field(alias="projectId")
    status: str
    priority: str = ""

    class Config:
        populate_by_name = True

    @field_validator("avatar", mode="before")
    @classmethod
    def _parse_avatar(cls, value):
        return decode_binary(value)

    @field_serializer("avatar", when_used="json")
    def _serialize_avatar(self, value: bytes) -> str:
        return encode_binary(value)


class TaskEnvelope(BaseModel):
    """``{"task": ...}`` response."""

    task: TaskResponse


class TaskListResponse(BaseModel):
    """``{"tasks": [...]}`` response."""

    tasks: List[TaskResponse]
