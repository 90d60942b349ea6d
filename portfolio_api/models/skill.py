from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from portfolio_api.utils.time_utils import get_utc_time


class Skill(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    category: str = Field(max_length=50, index=True)
    devicon: str = Field()
    created_at: datetime = Field(default_factory=get_utc_time)
    updated_at: datetime = Field(default_factory=get_utc_time)
