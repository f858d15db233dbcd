"""ORM model for portfolio projects."""

from sqlalchemy import Boolean, Column, DateTime, Integer, Text, func

from folio.models.base import Base


class Project(Base):
    """
    Project card. links_json holds the encoded list of link objects
    (e.g. [{"url": ..., "label": ...}]); decode it with services.projects.decode_links.
    """

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    summary = Column(Text, nullable=False)
    stack = Column(Text, nullable=False, default="", server_default="")
    links_json = Column(Text, nullable=False, default="[]", server_default="[]")
    featured = Column(Boolean, nullable=False, default=False, server_default="0")
    sort = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
