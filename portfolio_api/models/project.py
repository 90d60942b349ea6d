from sqlalchemy import Column, JSON, Text
from sqlmodel import SQLModel, Field
from typing import Optional, List
from datetime import datetime

from portfolio_api.utils.time_utils import get_utc_time


class Project(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    description: str = Field(sa_column=Column(Text, nullable=False))
    image_url: str = Field()
    live_url: Optional[str] = Field(default=None)
    github_url: Optional[str] = Field(default=None)
    technologies: List[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    featured: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=get_utc_time, index=True)
    updated_at: datetime = Field(default_factory=get_utc_time)
