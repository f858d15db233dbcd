"""Password hashing and session cookie signing."""

from datetime import UTC, datetime
from typing import Any

import bcrypt
import jwt

from folio.core.config import settings

# Bcrypt cost (rounds); fixed at setup, stored hashes carry their own cost.
BCRYPT_ROUNDS = 12

SESSION_COOKIE_ALGORITHM = "HS256"

USERNAME_MAX_LEN = 255
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def sign_session_id(session_id: str, secret: str | None = None) -> str:
    """Wrap an opaque session id in a signed token suitable for a cookie value."""
    payload: dict[str, Any] = {
        "sid": session_id,
        "iat": datetime.now(UTC),
    }
    key = secret or settings.SESSION_SECRET.get_secret_value()
    return jwt.encode(payload, key, algorithm=SESSION_COOKIE_ALGORITHM)


def unsign_session_id(token: str, secret: str | None = None) -> str | None:
    """
    Return the session id carried by a signed cookie value.
    Returns None when the signature is invalid or the payload is malformed.
    """
    key = secret or settings.SESSION_SECRET.get_secret_value()
    try:
        payload = jwt.decode(token, key, algorithms=[SESSION_COOKIE_ALGORITHM])
    except jwt.PyJWTError:
        return None
    sid = payload.get("sid")
    if not isinstance(sid, str) or not sid:
        return None
    return sid
