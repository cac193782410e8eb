"""User schemas."""
from typing import List

from pydantic import BaseModel, Field, field_serializer, field_validator

from app.schemas.common import decode_binary, encode_binary


class UserBase(BaseModel):
    """Base user schema."""

    name: str
    role: str = ""
    code: str = ""


class UserCreate(UserBase):
    """Registration payload; everything except the id."""

    login: str
    password: str


class UserResponse(UserBase):
    """User as returned on the wire.

    ``avatar`` holds whatever the projector produced (raw image or base64
    text as bytes) and is written to JSON as base64.
    """

    id: int
    login: str = ""
    password: str = ""
    projects_ids: List[int] = Field(default_factory=list)
    avatar: bytes = b""

    @field_validator("avatar", mode="before")
    @classmethod
    def _parse_avatar(cls, value):
        return decode_binary(value)

    @field_serializer("avatar", when_used="json")
    def _serialize_avatar(self, value: bytes) -> str:
        return encode_binary(value)


class UserEnvelope(BaseModel):
    """``{"user": ...}`` response."""

    user: UserResponse


class AvatarUpdate(BaseModel):
    """New avatar as base64 text."""

    avatar: str
