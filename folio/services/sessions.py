"""Server-side session store backed by the sessions table."""

import logging
import secrets
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from folio.models import LoginSession
from folio.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)

SESSION_ID_BYTES = 32


class SessionStore:
    """
    Create, resolve, and revoke login sessions.

    Writes are staged on the given SQLAlchemy session; callers commit so the
    session row and its audit entry share a transaction. Lookups ignore rows
    whose expires_at has passed.
    """

    def __init__(self, db: Session, ttl: timedelta) -> None:
        self.db = db
        self.ttl = ttl

    def create(self, user: CurrentUser) -> str:
        """Stage a new session for user and return its opaque id."""
        session_id = secrets.token_urlsafe(SESSION_ID_BYTES)
        self.db.add(
            LoginSession(
                id=session_id,
                username=user.username,
                role=user.role,
                expires_at=datetime.now(UTC) + self.ttl,
            )
        )
        return session_id

    def get(self, session_id: str) -> CurrentUser | None:
        """Return the session payload, or None if unknown or expired."""
        row = (
            self.db.query(LoginSession)
            .filter(
                LoginSession.id == session_id,
                LoginSession.expires_at > datetime.now(UTC),
            )
            .first()
        )
        if row is None:
            return None
        return CurrentUser(username=row.username, role=row.role)

    def destroy(self, session_id: str) -> None:
        """Stage removal of the session; unknown ids are ignored."""
        self.db.query(LoginSession).filter(LoginSession.id == session_id).delete(
            synchronize_session=False
        )

    def purge_expired(self) -> int:
        """Delete every expired session and commit. Returns the number removed."""
        deleted = (
            self.db.query(LoginSession)
            .filter(LoginSession.expires_at <= datetime.now(UTC))
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted > 0:
            logger.info("Purged expired sessions: count=%s", deleted)
        return deleted
