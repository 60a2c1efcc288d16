"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskboard.api.deps import get_session_manager
from taskboard.core.config import settings
from taskboard.core.database import check_db_connected, get_db
from taskboard.schemas.health import HealthResponse
from taskboard.services.sessions import SessionManager

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> HealthResponse:
    """Return service status, environment and whether the store answers."""
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database=db_status,
        active_sessions=len(sessions.store),
    )
