"""Authentication: credential checks and audited login/logout."""

import logging

from sqlalchemy.orm import Session

from folio.core.security import hash_password, verify_password
from folio.models import User
from folio.schemas.auth import CurrentUser
from folio.services import audit
from folio.services.sessions import SessionStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"

# Checked against when the username is unknown so both failure paths pay for bcrypt.
_DUMMY_HASH = hash_password("folio-unknown-user")


class AuthError(Exception):
    """Raised for any failed login. The message never says which part was wrong."""

    def __init__(self, message: str = INVALID_CREDENTIALS) -> None:
        self.message = message
        super().__init__(message)


def authenticate(db: Session, username: str, password: str) -> CurrentUser:
    """Return the user for valid credentials; raise AuthError otherwise."""
    user = db.query(User).filter(User.username == username).first()
    if user is None:
        verify_password(password, _DUMMY_HASH)
        raise AuthError()
    if not verify_password(password, user.password_hash):
        raise AuthError()
    return CurrentUser(username=user.username, role=user.role)


def login(
    db: Session,
    store: SessionStore,
    username: str,
    password: str,
) -> tuple[str, CurrentUser]:
    """
    Verify credentials, open a server-side session and audit the login.

    Returns (session_id, user). The session row and audit entry commit together.
    """
    try:
        user = authenticate(db, username, password)
    except AuthError:
        logger.info("Login rejected")
        raise
    session_id = store.create(user)
    audit.record(db, user.username, "login", "auth")
    db.commit()
    logger.info("Login succeeded: username=%s", user.username)
    return session_id, user


def logout(db: Session, store: SessionStore, session_id: str, user: CurrentUser) -> None:
    """Revoke the session server-side and audit the logout in one transaction."""
    store.destroy(session_id)
    audit.record(db, user.username, "logout", "auth")
    db.commit()
    logger.info("Logout: username=%s", user.username)
