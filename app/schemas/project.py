"""Project schemas."""
from typing import Dict

from pydantic import BaseModel


class ProjectCreate(BaseModel):
    """Project creation schema."""

    name: str


class ProjectNamesResponse(BaseModel):
    """``{"projects": {id: name}}`` response."""

    projects: Dict[int, str]
