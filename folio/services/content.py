"""Singleton hero content: read and full replace."""

from sqlalchemy import func, update
from sqlalchemy.orm import Session

from folio.models import CONTENT_ROW_ID, Content
from folio.schemas.content import ContentOut, ContentUpdate
from folio.services import audit


def get_content(db: Session) -> ContentOut | None:
    """Return the content row without its internal id (None only before bootstrap)."""
    row = db.get(Content, CONTENT_ROW_ID)
    if row is None:
        return None
    return ContentOut.model_validate(row)


def update_content(db: Session, actor: str, body: ContentUpdate) -> None:
    """Replace both hero fields, stamp updated_at, and audit in one transaction."""
    db.execute(
        update(Content)
        .where(Content.id == CONTENT_ROW_ID)
        .values(
            hero_headline=body.hero_headline,
            hero_subtitle=body.hero_subtitle,
            updated_at=func.now(),
        )
        .execution_options(synchronize_session=False)
    )
    audit.record(db, actor, "update", "content", CONTENT_ROW_ID)
    db.commit()
