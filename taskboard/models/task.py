"""ORM model for a user's text task."""

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from taskboard.models.base import Base


class Task(Base):
    """One line of text on its owner's list. Created and deleted, never edited."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column("user_id", Integer, ForeignKey("users.id"), nullable=False, index=True)
    text = Column("task", Text, nullable=False)

    owner = relationship("User", back_populates="tasks")
