"""Schema for the public aggregated content endpoint."""

from pydantic import BaseModel

from folio.schemas.content import ContentOut
from folio.schemas.projects import ProjectOut
from folio.schemas.skills import SkillOut


class PublicContentResponse(BaseModel):
    """Everything the front-end site needs in one read."""

    content: ContentOut | None
    skills: list[SkillOut]
    projects: list[ProjectOut]
