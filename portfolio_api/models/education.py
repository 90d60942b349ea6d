from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field
from typing import Optional, List
from datetime import date, datetime

from portfolio_api.utils.time_utils import get_utc_time


class Education(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    institution: str = Field(max_length=255)
    degree: str = Field(max_length=255)
    field: str = Field(max_length=255)
    start_date: date = Field(index=True)
    end_date: Optional[date] = Field(default=None)
    grade: Optional[str] = Field(default=None)
    achievements: List[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    created_at: datetime = Field(default_factory=get_utc_time)
    updated_at: datetime = Field(default_factory=get_utc_time)
