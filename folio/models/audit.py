"""ORM model for the append-only audit log."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from folio.models.base import Base


class AuditEntry(Base):
    """
    One row per state-changing admin action (login and logout included).

    Rows are only ever inserted; nothing in the application updates or deletes them.
    """

    __tablename__ = "audit_log"

    id = Column(Integer, primary_key=True, autoincrement=True)
    actor = Column(String(255), nullable=False)
    action = Column(String(32), nullable=False, index=True)
    entity = Column(String(32), nullable=False, index=True)
    entity_id = Column(Integer, nullable=True)
    meta_json = Column(Text, nullable=False, default="{}", server_default="{}")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
