"""User and membership models."""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, LargeBinary, String

from app.database import Base


class User(Base):
    """User model.

    ``login`` and ``password`` are stored and compared as plaintext. This is
    inherited behaviour and is not safe for production use; moving to salted
    hashes changes the login contract and needs a product decision.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    role = Column(String(100), nullable=False, default="")
    code = Column(String(255), nullable=False, default="")
    login = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    avatar = Column(LargeBinary, nullable=True)


class UserProject(Base):
    """One entry of a user's project membership set.

    Entries are not unique per (user, project): adding the same project twice
    yields two rows, and removal deletes all of them.
    """

    __tablename__ = "user_projects"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    joined_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
