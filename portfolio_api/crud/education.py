import logging

from fastapi import HTTPException, status
from sqlmodel import Session, select

from portfolio_api.models.education import Education
from portfolio_api.schemas.education import EducationCreate, EducationUpdate
from portfolio_api.utils.time_utils import get_utc_time

logger = logging.getLogger(__name__)


def get_education_entries(db: Session) -> list[Education]:
    """
    Retrieve the education timeline, most recent start date first.

    Entries sharing a start date keep a stable order by newest ID.
    """
    query = select(Education).order_by(Education.start_date.desc(), Education.id.desc())
    return db.exec(query).all()


def get_education(db: Session, education_id: int) -> Education:
    """
    Retrieve one education entry.

    Raises:
        HTTPException: 404 error if the entry does not exist
    """
    education = db.get(Education, education_id)
    if education is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Education entry not found",
        )
    return education


def create_education(db: Session, education: EducationCreate) -> Education:
    db_education = Education(**education.model_dump())

    db.add(db_education)
    db.commit()
    db.refresh(db_education)

    logger.info(f"Education entry {db_education.id} created: {db_education.institution}")
    return db_education


def update_education(
    db: Session, education_id: int, education: EducationUpdate
) -> Education:
    """Replace an education entry; an omitted endDate or grade is cleared."""
    db_education = get_education(db, education_id)

    for key, value in education.model_dump().items():
        setattr(db_education, key, value)
    db_education.updated_at = get_utc_time()

    db.add(db_education)
    db.commit()
    db.refresh(db_education)
    return db_education


def delete_education(db: Session, education_id: int) -> bool:
    education = db.get(Education, education_id)
    if education is None:
        return False

    db.delete(education)
    db.commit()
    logger.info(f"Education entry {education_id} deleted")
    return True
