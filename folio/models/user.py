"""ORM model for the admin account."""

from sqlalchemy import Column, DateTime, Integer, String, func

from folio.models.base import Base


class User(Base):
    """
    Login account for the admin UI.

    Seeded once at startup from ADMIN_USERNAME / ADMIN_PASSWORD; the API never
    updates or deletes users.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="admin", server_default="admin")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
