"""Audit recorder: stage an append-only entry in the caller's transaction."""

import json
from typing import Any, Literal

from sqlalchemy.orm import Session

from folio.models import AuditEntry

AuditAction = Literal["login", "logout", "create", "update", "delete"]
AuditEntity = Literal["auth", "content", "skill", "project"]


def record(
    db: Session,
    actor: str,
    action: AuditAction,
    entity: AuditEntity,
    entity_id: int | None = None,
    meta: dict[str, Any] | None = None,
) -> AuditEntry:
    """
    Add an audit entry to the db session without committing.

    The caller commits it together with the change it describes, so an entity
    write and its audit row land or fail as one unit.
    """
    entry = AuditEntry(
        actor=actor,
        action=action,
        entity=entity,
        entity_id=entity_id,
        meta_json=json.dumps(meta or {}),
    )
    db.add(entry)
    return entry

