"""In-memory login sessions: opaque id -> identity snapshot taken at login."""

import logging
import secrets
import threading
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from taskboard.core.security import verify_password
from taskboard.schemas.auth import IdentitySnapshot
from taskboard.services.errors import InvalidUsernameError, WrongPasswordError
from taskboard.services.users import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class SessionEntry:
    snapshot: IdentitySnapshot
    expires_at: datetime


class SessionStore:
    """
    Process-wide session map. Not persisted; everything is lost on restart.

    Guarded by a lock because sync handlers run on threadpool workers.
    """

    def __init__(self) -> None:
        self._entries: dict[str, SessionEntry] = {}
        self._lock = threading.Lock()

    def create(self, snapshot: IdentitySnapshot, expires_at: datetime) -> str:
        session_id = secrets.token_urlsafe(32)
        with self._lock:
            self._entries[session_id] = SessionEntry(snapshot=snapshot, expires_at=expires_at)
        return session_id

    def get(self, session_id: str, now: datetime) -> SessionEntry | None:
        """Return the live entry; an expired entry is dropped and None returned."""
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is None:
                return None
            if entry.expires_at <= now:
                del self._entries[session_id]
                return None
            return entry

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._entries.pop(session_id, None)

    def purge_expired(self, now: datetime) -> int:
        with self._lock:
            expired = [sid for sid, e in self._entries.items() if e.expires_at <= now]
            for sid in expired:
                del self._entries[sid]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class SessionManager:
    """Login/logout lifecycle on top of a SessionStore."""

    def __init__(self, store: SessionStore, ttl: timedelta) -> None:
        self.store = store
        self.ttl = ttl

    def login(self, users: UserRepository, username: str, password: str) -> str:
        """
        Verify credentials and open a session; return its id.

        Raises InvalidUsernameError or WrongPasswordError; no session is created then.
        """
        user = users.find_by_username(username) if username else None
        if user is None:
            raise InvalidUsernameError("Invalid username")
        if not verify_password(password or "", user.password_hash):
            raise WrongPasswordError("Wrong password")

        now = datetime.now(UTC)
        self.store.purge_expired(now)
        snapshot = IdentitySnapshot(
            id=user.id,
            username=user.username,
            full_name=user.full_name,
            email=user.email,
        )
        return self.store.create(snapshot, expires_at=now + self.ttl)

    def authenticate(self, session_id: str | None) -> IdentitySnapshot | None:
        if not session_id:
            return None
        entry = self.store.get(session_id, datetime.now(UTC))
        return entry.snapshot if entry is not None else None

    def update_snapshot(self, session_id: str, full_name: str, email: str) -> None:
        """Reflect a profile update in the cached snapshot; unknown sessions are ignored."""
        entry = self.store.get(session_id, datetime.now(UTC))
        if entry is None:
            return
        entry.snapshot.full_name = full_name
        entry.snapshot.email = email

    def logout(self, session_id: str | None) -> None:
        if session_id:
            self.store.delete(session_id)
