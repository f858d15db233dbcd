"""Admin CRUD endpoints for skills."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from folio.api.deps import RowId, require_auth
from folio.core.database import get_db
from folio.schemas.auth import CurrentUser
from folio.schemas.common import CreatedResponse, OkResponse
from folio.schemas.skills import SkillIn, SkillsResponse
from folio.services import skills as skills_service

router = APIRouter()


@router.get("", response_model=SkillsResponse)
def list_skills(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_auth)],
) -> SkillsResponse:
    return SkillsResponse(skills=skills_service.list_skills(db))


@router.post("", response_model=CreatedResponse)
def create_skill(
    body: SkillIn,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_auth)],
) -> CreatedResponse:
    skill_id = skills_service.create_skill(db, user.username, body)
    return CreatedResponse(id=skill_id)


@router.put("/{skill_id}", response_model=OkResponse)
def update_skill(
    skill_id: RowId,
    body: SkillIn,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_auth)],
) -> OkResponse:
    """Full replace. Succeeds even when skill_id does not exist."""
    skills_service.update_skill(db, user.username, skill_id, body)
    return OkResponse()


@router.delete("/{skill_id}", response_model=OkResponse)
def delete_skill(
    skill_id: RowId,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_auth)],
) -> OkResponse:
    skills_service.delete_skill(db, user.username, skill_id)
    return OkResponse()
