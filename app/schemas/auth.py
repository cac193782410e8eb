"""Authentication schemas."""
from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Credentials submitted to the login endpoint."""

    login: str
    password: str
