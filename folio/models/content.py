"""ORM model for the singleton site content row."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Text, func

from folio.models.base import Base

CONTENT_ROW_ID = 1


class Content(Base):
    """Hero text shown on the portfolio front page. Exactly one row, id 1."""

    __tablename__ = "content"
    __table_args__ = (CheckConstraint("id = 1", name="singleton"),)

    id = Column(Integer, primary_key=True, autoincrement=False)
    hero_headline = Column(Text, nullable=False)
    hero_subtitle = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
