"""ORM model for application users."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from taskboard.models.base import Base


class User(Base):
    """
    Registered account owning a list of tasks.

    The hash lives in the ``password`` column; it is never serialized.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column("password", String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)

    tasks = relationship("Task", back_populates="owner")
