"""Signup, login and logout."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from taskboard.api.deps import get_current_session_id, get_session_manager
from taskboard.core.config import settings
from taskboard.core.database import get_db
from taskboard.core.security import encode_session_cookie
from taskboard.schemas.auth import LoginRequest, SignupRequest, SuccessResponse
from taskboard.services.errors import (
    AuthError,
    CredentialError,
    DuplicateUsernameError,
    StorageError,
    ValidationError,
)
from taskboard.services.sessions import SessionManager
from taskboard.services.users import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_model=SuccessResponse)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
) -> SuccessResponse:
    """
    Register a new user. All four fields are required; the username must be unused.
    Runs on the threadpool so bcrypt does not hold up other requests.
    """
    users = UserRepository(db)
    try:
        users.create_user(body.username, body.password, body.full_name, body.email)
    except (ValidationError, DuplicateUsernameError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except (CredentialError, StorageError) as e:
        logger.exception("Signup failed for username=%s", body.username)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Signup failed"
        ) from e
    return SuccessResponse(success="Signup successful! Login now.")


@router.post("/login", response_model=SuccessResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
    previous_session_id: Annotated[str | None, Depends(get_current_session_id)],
) -> JSONResponse:
    """
    Check username and password and open a session.
    The session id is returned in a signed cookie; the body names the next page.
    A session already carried by the request is ended once the new one exists.
    """
    try:
        session_id = sessions.login(UserRepository(db), body.username, body.password)
    except AuthError as e:
        logger.warning("Login rejected for username=%s: %s", body.username, e.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e

    sessions.logout(previous_session_id)
    logger.info("User %s logged in", body.username)
    response = JSONResponse(SuccessResponse(success="/dashboard").model_dump())
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=encode_session_cookie(session_id),
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return response


@router.get("/logout")
def logout(
    session_id: Annotated[str | None, Depends(get_current_session_id)],
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> RedirectResponse:
    """End the session if there is one and go back to the entry page."""
    sessions.logout(session_id)
    response = RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response
