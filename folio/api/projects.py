"""Admin CRUD endpoints for projects; links are returned decoded."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from folio.api.deps import RowId, require_auth
from folio.core.database import get_db
from folio.schemas.auth import CurrentUser
from folio.schemas.common import CreatedResponse, OkResponse
from folio.schemas.projects import ProjectIn, ProjectsResponse
from folio.services import projects as projects_service

router = APIRouter()


@router.get("", response_model=ProjectsResponse)
def list_projects(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_auth)],
) -> ProjectsResponse:
    return ProjectsResponse(projects=projects_service.list_projects(db))


@router.post("", response_model=CreatedResponse)
def create_project(
    body: ProjectIn,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_auth)],
) -> CreatedResponse:
    project_id = projects_service.create_project(db, user.username, body)
    return CreatedResponse(id=project_id)


@router.put("/{project_id}", response_model=OkResponse)
def update_project(
    project_id: RowId,
    body: ProjectIn,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_auth)],
) -> OkResponse:
    """Full replace. Succeeds even when project_id does not exist."""
    projects_service.update_project(db, user.username, project_id, body)
    return OkResponse()


@router.delete("/{project_id}", response_model=OkResponse)
def delete_project(
    project_id: RowId,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_auth)],
) -> OkResponse:
    projects_service.delete_project(db, user.username, project_id)
    return OkResponse()
