from typing import List, Optional
from datetime import datetime
from pydantic import Field

from portfolio_api.schemas.base import CamelModel


class ProjectBase(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    image_url: str
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    technologies: List[str] = []
    featured: bool = False


class ProjectCreate(ProjectBase):
    pass


# Full replacement: anything left out falls back to its default
class ProjectUpdate(ProjectBase):
    pass


class ProjectRead(ProjectBase):
    id: int
    created_at: datetime
    updated_at: datetime
