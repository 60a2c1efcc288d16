"""Password hashing and signed session cookies."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from taskboard.core.config import settings

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def encode_session_cookie(session_id: str) -> str:
    """Wrap an opaque session id in a signed, expiring JWT for the cookie value."""
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sid": session_id,
        "iat": now,
        "exp": now + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES),
    }
    return jwt.encode(
        payload,
        settings.SESSION_SECRET.get_secret_value(),
        algorithm=settings.SESSION_ALGORITHM,
    )


def decode_session_cookie(token: str) -> str | None:
    """
    Return the session id carried by a cookie value.
    None if the signature is wrong, the token expired or the payload has no sid.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SESSION_SECRET.get_secret_value(),
            algorithms=[settings.SESSION_ALGORITHM],
        )
    except jwt.PyJWTError:
        return None
    sid = payload.get("sid")
    if not isinstance(sid, str) or not sid:
        return None
    return sid
