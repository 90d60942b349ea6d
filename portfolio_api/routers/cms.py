from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from portfolio_api.crud.content import get_singleton, upsert_singleton
from portfolio_api.crud.education import (
    create_education,
    delete_education,
    get_education,
    get_education_entries,
    update_education,
)
from portfolio_api.dependencies import get_current_admin, get_db
from portfolio_api.models.content import AboutSection, HeroSection
from portfolio_api.schemas.base import MessageResponse
from portfolio_api.schemas.content import AboutRead, AboutUpdate, HeroRead, HeroUpdate
from portfolio_api.schemas.education import (
    EducationCreate,
    EducationRead,
    EducationUpdate,
)


router = APIRouter(
    prefix="/api/cms",
    tags=["cms"],
)


# Hero section


@router.get("/hero")
def read_hero_endpoint(db: Session = Depends(get_db)):
    """
    Retrieve the hero section.
    Returns an empty object until the section has been saved once.
    """
    hero = get_singleton(db, HeroSection)
    if hero is None:
        return {}
    return HeroRead.model_validate(hero)


@router.put("/hero", response_model=HeroRead)
def update_hero_endpoint(
    hero: HeroUpdate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """Create or replace the hero section (name and rotating roles)."""
    return upsert_singleton(db, HeroSection, hero.model_dump())


# About section


@router.get("/about")
def read_about_endpoint(db: Session = Depends(get_db)):
    """
    Retrieve the about section.
    Returns an empty object until the section has been saved once.
    """
    about = get_singleton(db, AboutSection)
    if about is None:
        return {}
    return AboutRead.model_validate(about)


@router.put("/about", response_model=AboutRead)
def update_about_endpoint(
    about: AboutUpdate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """Create or replace the about section."""
    return upsert_singleton(db, AboutSection, about.model_dump())


# Education


@router.get("/education", response_model=List[EducationRead])
def read_education_endpoint(db: Session = Depends(get_db)):
    """
    Retrieve all education entries, most recent start date first.

    Access Level: PUBLIC
    """
    return get_education_entries(db)


@router.get("/education/{education_id}", response_model=EducationRead)
def read_education_entry_endpoint(education_id: int, db: Session = Depends(get_db)):
    return get_education(db, education_id=education_id)


@router.post(
    "/education", response_model=EducationRead, status_code=status.HTTP_201_CREATED
)
def create_education_endpoint(
    education: EducationCreate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Add an education entry.

    Access Level: ADMIN only
    """
    return create_education(db=db, education=education)


@router.put("/education/{education_id}", response_model=EducationRead)
def update_education_endpoint(
    education_id: int,
    education: EducationUpdate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Replace an education entry.

    Access Level: ADMIN only
    """
    return update_education(db, education_id=education_id, education=education)


@router.delete("/education/{education_id}", response_model=MessageResponse)
def delete_education_endpoint(
    education_id: int,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Delete an education entry.

    Access Level: ADMIN only
    """
    success = delete_education(db, education_id=education_id)
    if not success:
        raise HTTPException(status_code=404, detail="Education entry not found")
    return {"message": "Education entry deleted successfully"}
