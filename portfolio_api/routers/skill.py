from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from portfolio_api.crud.skill import create_skill, delete_skill, get_skills, update_skill
from portfolio_api.dependencies import get_current_admin, get_db
from portfolio_api.schemas.base import MessageResponse
from portfolio_api.schemas.skill import SkillCreate, SkillRead, SkillUpdate


router = APIRouter(
    prefix="/api",
    tags=["skills"],
)


@router.get("/skills", response_model=List[SkillRead])
def read_public_skills_endpoint(db: Session = Depends(get_db)):
    """Public skill list for the portfolio page, ordered by category."""
    return get_skills(db)


@router.get("/cms/skills", response_model=List[SkillRead])
def read_skills_endpoint(
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """Same list as /api/skills, for the admin CMS."""
    return get_skills(db)


@router.post("/cms/skills", response_model=SkillRead, status_code=status.HTTP_201_CREATED)
def create_skill_endpoint(
    skill: SkillCreate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    return create_skill(db=db, skill=skill)


@router.put("/cms/skills/{skill_id}", response_model=SkillRead)
def update_skill_endpoint(
    skill_id: int,
    skill: SkillUpdate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    return update_skill(db, skill_id=skill_id, skill=skill)


@router.delete("/cms/skills/{skill_id}", response_model=MessageResponse)
def delete_skill_endpoint(
    skill_id: int,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    success = delete_skill(db, skill_id=skill_id)
    if not success:
        raise HTTPException(status_code=404, detail="Skill not found")
    return {"message": "Skill deleted successfully"}
