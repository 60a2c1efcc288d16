"""SQLAlchemy ORM models."""

from taskboard.models.base import Base
from taskboard.models.task import Task
from taskboard.models.user import User

__all__ = ["Base", "Task", "User"]
