"""Public read-only endpoint consumed by the front-end site."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from folio.core.database import get_db
from folio.schemas.public import PublicContentResponse
from folio.services.content import get_content
from folio.services.projects import list_projects
from folio.services.skills import list_skills

router = APIRouter()


@router.get("/content", response_model=PublicContentResponse)
def get_public_content(
    db: Annotated[Session, Depends(get_db)],
) -> PublicContentResponse:
    """
    Current hero content, all skills, and all projects in one payload.
    No authentication; CORS restricts browser access to ALLOWED_ORIGIN.
    """
    return PublicContentResponse(
        content=get_content(db),
        skills=list_skills(db),
        projects=list_projects(db),
    )
