"""Current user's identity and profile update."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskboard.api.deps import (
    get_current_session_id,
    get_session_manager,
    require_identity,
    require_page_identity,
)
from taskboard.core.database import get_db
from taskboard.schemas.auth import IdentitySnapshot, ProfileUpdateRequest, SuccessResponse
from taskboard.services.errors import StorageError
from taskboard.services.sessions import SessionManager
from taskboard.services.users import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/user-details", response_model=IdentitySnapshot)
def user_details(
    identity: Annotated[IdentitySnapshot, Depends(require_page_identity)],
) -> IdentitySnapshot:
    """Identity snapshot held by the session (no database read)."""
    return identity


@router.post("/update-profile", response_model=SuccessResponse)
def update_profile(
    body: ProfileUpdateRequest,
    identity: Annotated[IdentitySnapshot, Depends(require_identity)],
    session_id: Annotated[str | None, Depends(get_current_session_id)],
    db: Annotated[Session, Depends(get_db)],
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> SuccessResponse:
    try:
        UserRepository(db).update_profile(identity.id, body.full_name, body.email)
    except StorageError as e:
        logger.exception("Profile update failed for user id=%s", identity.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message
        ) from e
    # require_identity succeeded, so the session id is set
    sessions.update_snapshot(session_id, body.full_name, body.email)
    return SuccessResponse(success="Profile updated")
