"""ORM model for skills listed on the portfolio."""

from sqlalchemy import CheckConstraint, Column, Float, Integer, Text

from folio.models.base import Base


class Skill(Base):
    __tablename__ = "skills"
    __table_args__ = (
        CheckConstraint("percent >= 0 AND percent <= 100", name="percent_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(Text, nullable=False)
    percent = Column(Float, nullable=False)
    sort = Column(Integer, nullable=False, default=0, server_default="0")
