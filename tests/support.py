"""Shared helpers: a private in-memory SQLite database per test case."""

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.core.database import init_db


def make_sessionmaker() -> sessionmaker[Session]:
    """One shared connection so every session (and thread) sees the same tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
