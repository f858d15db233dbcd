"""SQLAlchemy ORM models."""

from folio.models.audit import AuditEntry
from folio.models.base import Base
from folio.models.content import CONTENT_ROW_ID, Content
from folio.models.project import Project
from folio.models.session import LoginSession
from folio.models.skill import Skill
from folio.models.user import User

__all__ = [
    "AuditEntry",
    "Base",
    "CONTENT_ROW_ID",
    "Content",
    "LoginSession",
    "Project",
    "Skill",
    "User",
]
