import logging

from fastapi import HTTPException, status
from sqlmodel import Session, select

from portfolio_api.models.skill import Skill
from portfolio_api.schemas.skill import SkillCreate, SkillUpdate
from portfolio_api.utils.time_utils import get_utc_time

logger = logging.getLogger(__name__)


def get_skills(db: Session) -> list[Skill]:
    """All skills grouped by category (ascending), then by name."""
    query = select(Skill).order_by(Skill.category.asc(), Skill.name.asc())
    return db.exec(query).all()


def get_skill(db: Session, skill_id: int) -> Skill:
    skill = db.get(Skill, skill_id)
    if skill is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Skill not found",
        )
    return skill


def create_skill(db: Session, skill: SkillCreate) -> Skill:
    db_skill = Skill(**skill.model_dump())

    db.add(db_skill)
    db.commit()
    db.refresh(db_skill)

    logger.info(f"Skill {db_skill.id} created: {db_skill.name} ({db_skill.category})")
    return db_skill


def update_skill(db: Session, skill_id: int, skill: SkillUpdate) -> Skill:
    db_skill = get_skill(db, skill_id)

    for key, value in skill.model_dump().items():
        setattr(db_skill, key, value)
    db_skill.updated_at = get_utc_time()

    db.add(db_skill)
    db.commit()
    db.refresh(db_skill)
    return db_skill


def delete_skill(db: Session, skill_id: int) -> bool:
    skill = db.get(Skill, skill_id)
    if skill is None:
        return False

    db.delete(skill)
    db.commit()
    logger.info(f"Skill {skill_id} deleted")
    return True
