from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from portfolio_api.crud.project import (
    create_project,
    delete_project,
    get_project,
    get_projects,
    update_project,
)
from portfolio_api.dependencies import get_current_admin, get_db
from portfolio_api.schemas.base import MessageResponse
from portfolio_api.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate


router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[ProjectRead])
def read_projects_endpoint(db: Session = Depends(get_db)):
    """
    Retrieve all projects, newest first.

    Access Level: PUBLIC
    """
    return get_projects(db)


@router.get("/featured", response_model=List[ProjectRead])
def read_featured_projects_endpoint(db: Session = Depends(get_db)):
    """
    Retrieve only the projects flagged as featured, newest first.

    This is what the home page shows. The result is exactly the set of
    projects whose featured flag is true.

    Access Level: PUBLIC
    """
    return get_projects(db, featured=True)


@router.get("/{project_id}", response_model=ProjectRead)
def read_project_endpoint(project_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a single project.

    Raises:
        HTTPException: 404 if project is not found (handled by CRUD layer)

    Access Level: PUBLIC
    """
    return get_project(db, project_id=project_id)


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project_endpoint(
    project: ProjectCreate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Create a new project.

    Featuring the project is refused with 400 once the featured limit is
    reached.

    Access Level: ADMIN only
    """
    return create_project(db=db, project=project)


@router.put("/{project_id}", response_model=ProjectRead)
def update_project_endpoint(
    project_id: int,
    project: ProjectUpdate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Replace a project with the submitted representation.

    Optional fields that are not sent (liveUrl, githubUrl) are cleared and
    featured falls back to false, so clients must send the whole project.

    Access Level: ADMIN only
    """
    return update_project(db, project_id=project_id, project=project)


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project_endpoint(
    project_id: int,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Delete a project.

    Access Level: ADMIN only
    """
    success = delete_project(db, project_id=project_id)
    if not success:
        raise HTTPException(status_code=404, detail="Project not found")
    return {"message": "Project deleted successfully"}
