"""Projects CRUD and the links_json codec."""

import json
import logging
from typing import Any

from sqlalchemy import delete, func, update
from sqlalchemy.orm import Session

from folio.models import Project
from folio.schemas.projects import ProjectIn, ProjectOut
from folio.services import audit

logger = logging.getLogger(__name__)


def encode_links(links: list[dict[str, Any]]) -> str:
    return json.dumps(links)


def decode_links(raw: str | None) -> list[Any]:
    """Decode stored links; empty, malformed or non-list values yield []."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Discarding malformed links_json: %r", raw[:200])
        return []
    return value if isinstance(value, list) else []


def _to_out(row: Project) -> ProjectOut:
    return ProjectOut(
        id=row.id,
        title=row.title,
        summary=row.summary,
        stack=row.stack,
        links=decode_links(row.links_json),
        featured=bool(row.featured),
        sort=row.sort,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def list_projects(db: Session) -> list[ProjectOut]:
    """Featured first, then sort ascending, then newest id first."""
    rows = (
        db.query(Project)
        .order_by(Project.featured.desc(), Project.sort.asc(), Project.id.desc())
        .all()
    )
    return [_to_out(r) for r in rows]


def _columns(body: ProjectIn) -> dict[str, Any]:
    return {
        "title": body.title,
        "summary": body.summary,
        "stack": body.stack,
        "links_json": encode_links(body.links),
        "featured": body.featured,
        "sort": body.sort,
    }


def create_project(db: Session, actor: str, body: ProjectIn) -> int:
    project = Project(**_columns(body))
    db.add(project)
    db.flush()
    audit.record(db, actor, "create", "project", project.id, {"title": body.title})
    db.commit()
    return project.id


def update_project(db: Session, actor: str, project_id: int, body: ProjectIn) -> None:
    """Full replace and refresh updated_at. An unknown id changes nothing but is still audited."""
    db.execute(
        update(Project)
        .where(Project.id == project_id)
        .values(**_columns(body), updated_at=func.now())
        .execution_options(synchronize_session=False)
    )
    audit.record(db, actor, "update", "project", project_id, {"title": body.title})
    db.commit()


def delete_project(db: Session, actor: str, project_id: int) -> None:
    db.execute(
        delete(Project)
        .where(Project.id == project_id)
        .execution_options(synchronize_session=False)
    )
    audit.record(db, actor, "delete", "project", project_id)
    db.commit()
