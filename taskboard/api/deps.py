"""Auth gate dependencies: resolve the session cookie to an identity before any handler runs."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from taskboard.core.config import settings
from taskboard.core.security import decode_session_cookie
from taskboard.schemas.auth import IdentitySnapshot
from taskboard.services.sessions import SessionManager


class LoginRequired(Exception):
    """Raised by the page gate; rendered as a redirect to the entry page."""


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.sessions


def get_current_session_id(request: Request) -> str | None:
    """Session id from the signed cookie, or None if absent or tampered with."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    return decode_session_cookie(token)


def get_optional_identity(
    session_id: Annotated[str | None, Depends(get_current_session_id)],
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
) -> IdentitySnapshot | None:
    return sessions.authenticate(session_id)


def require_identity(
    identity: Annotated[IdentitySnapshot | None, Depends(get_optional_identity)],
) -> IdentitySnapshot:
    """Dependency for JSON routes: 401 when there is no valid session."""
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return identity


def require_page_identity(
    identity: Annotated[IdentitySnapshot | None, Depends(get_optional_identity)],
) -> IdentitySnapshot:
    """Dependency for page routes: redirect to / when there is no valid session."""
    if identity is None:
        raise LoginRequired()
    return identity
