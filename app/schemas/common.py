"""Common schemas."""
import base64
from typing import Optional

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement payload."""

    message: str


class ErrorResponse(BaseModel):
    """Error payload shared by every endpoint."""

    error: str


def encode_binary(value: Optional[bytes]) -> Optional[str]:
    """Write binary fields to JSON as standard base64 text."""
    if value is None:
        return None
    return base64.b64encode(value).decode("ascii")


def decode_binary(value):
    """Accept binary fields either as bytes or as their base64 JSON form."""
    if isinstance(value, str):
        return base64.b64decode(value)
    return value
