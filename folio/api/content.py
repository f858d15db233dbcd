"""Admin endpoints for the singleton hero content."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from folio.api.deps import require_auth
from folio.core.database import get_db
from folio.schemas.auth import CurrentUser
from folio.schemas.common import OkResponse
from folio.schemas.content import ContentResponse, ContentUpdate
from folio.services import content as content_service

router = APIRouter()


@router.get("", response_model=ContentResponse)
def get_content(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_auth)],
) -> ContentResponse:
    return ContentResponse(content=content_service.get_content(db))


@router.put("", response_model=OkResponse)
def put_content(
    body: ContentUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_auth)],
) -> OkResponse:
    """Replace headline and subtitle together; both are required and trimmed."""
    content_service.update_content(db, user.username, body)
    return OkResponse()
