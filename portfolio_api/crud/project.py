import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session, func, select

from portfolio_api.config import FEATURED_PROJECTS_LIMIT
from portfolio_api.models.project import Project
from portfolio_api.schemas.project import ProjectCreate, ProjectUpdate
from portfolio_api.utils.time_utils import get_utc_time

logger = logging.getLogger(__name__)


def get_projects(db: Session, featured: Optional[bool] = None) -> list[Project]:
    """
    Retrieve projects, newest first.

    Args:
        db: Database session for query execution
        featured: When set, only projects whose featured flag equals it

    Returns:
        list[Project]: Projects ordered by creation time descending
    """
    query = select(Project)

    if featured is not None:
        query = query.where(Project.featured == featured)

    query = query.order_by(Project.created_at.desc(), Project.id.desc())
    return db.exec(query).all()


def get_project(db: Session, project_id: int) -> Project:
    """
    Retrieve a project by ID.

    Raises:
        HTTPException: 404 error if project not found
    """
    project = db.get(Project, project_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )
    return project


def count_featured(db: Session, exclude_id: Optional[int] = None) -> int:
    query = select(func.count()).select_from(Project).where(Project.featured == True)  # noqa: E712
    if exclude_id is not None:
        query = query.where(Project.id != exclude_id)
    return db.exec(query).one()


def check_featured_limit(db: Session, project_id: Optional[int] = None) -> None:
    """
    Refuse to feature another project once the limit is reached.

    The project being updated is not counted against itself, so re-saving an
    already featured project is always allowed.

    Raises:
        HTTPException: 400 error if the featured limit would be exceeded
    """
    if count_featured(db, exclude_id=project_id) >= FEATURED_PROJECTS_LIMIT:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Maximum {FEATURED_PROJECTS_LIMIT} projects can be featured",
        )


def create_project(db: Session, project: ProjectCreate) -> Project:
    """
    Create a new project.

    Args:
        db: Database session for transaction management
        project: Validated project data

    Returns:
        Project: Newly created project with generated ID

    Raises:
        HTTPException: 400 error if it would exceed the featured limit
    """
    if project.featured:
        check_featured_limit(db)

    db_project = Project(**project.model_dump())

    db.add(db_project)
    db.commit()
    db.refresh(db_project)

    logger.info(f"Project {db_project.id} created: {db_project.title}")
    return db_project


def update_project(db: Session, project_id: int, project: ProjectUpdate) -> Project:
    """
    Replace a project's content.

    Every field is written, so optional fields missing from the request are
    cleared rather than kept.

    Raises:
        HTTPException: 404 error if project not found
        HTTPException: 400 error if it would exceed the featured limit
    """
    db_project = get_project(db, project_id)

    if project.featured and not db_project.featured:
        check_featured_limit(db, project_id=project_id)

    for key, value in project.model_dump().items():
        setattr(db_project, key, value)
    db_project.updated_at = get_utc_time()

    db.add(db_project)
    db.commit()
    db.refresh(db_project)

    logger.info(f"Project {project_id} updated")
    return db_project


def delete_project(db: Session, project_id: int) -> bool:
    """Delete a project. Returns False if it did not exist."""
    project = db.get(Project, project_id)
    if project is None:
        return False

    db.delete(project)
    db.commit()
    logger.info(f"Project {project_id} deleted")
    return True
