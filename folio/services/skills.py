"""Skills CRUD. Update and delete do not check that the id exists."""

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from folio.models import Skill
from folio.schemas.skills import SkillIn, SkillOut
from folio.services import audit


def list_skills(db: Session) -> list[SkillOut]:
    """All skills ordered by sort ascending, then id ascending."""
    rows = db.query(Skill).order_by(Skill.sort.asc(), Skill.id.asc()).all()
    return [SkillOut.model_validate(r) for r in rows]


def create_skill(db: Session, actor: str, body: SkillIn) -> int:
    """Insert a skill and return its id."""
    skill = Skill(label=body.label, percent=body.percent, sort=body.sort)
    db.add(skill)
    db.flush()
    audit.record(
        db, actor, "create", "skill", skill.id, {"label": body.label, "percent": body.percent}
    )
    db.commit()
    return skill.id


def update_skill(db: Session, actor: str, skill_id: int, body: SkillIn) -> None:
    """Replace label, percent and sort. An unknown id changes nothing but is still audited."""
    db.execute(
        update(Skill)
        .where(Skill.id == skill_id)
        .values(label=body.label, percent=body.percent, sort=body.sort)
        .execution_options(synchronize_session=False)
    )
    audit.record(
        db, actor, "update", "skill", skill_id, {"label": body.label, "percent": body.percent}
    )
    db.commit()


def delete_skill(db: Session, actor: str, skill_id: int) -> None:
    db.execute(
        delete(Skill)
        .where(Skill.id == skill_id)
        .execution_options(synchronize_session=False)
    )
    audit.record(db, actor, "delete", "skill", skill_id)
    db.commit()
