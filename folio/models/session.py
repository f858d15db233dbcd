"""ORM model for server-held login sessions."""

from sqlalchemy import Column, DateTime, String, func

from folio.models.base import Base


class LoginSession(Base):
    """
    Server-side session record. The cookie carries only the signed id; the
    username and role live here so logout can revoke the session.
    """

    __tablename__ = "sessions"

    id = Column(String(64), primary_key=True)
    username = Column(String(255), nullable=False, index=True)
    role = Column(String(32), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
