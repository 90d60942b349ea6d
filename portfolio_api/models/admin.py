from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from portfolio_api.utils.time_utils import get_utc_time


class Admin(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    # Shared secret, stored as entered
    passcode: str = Field(unique=True, index=True)
    name: str = Field(max_length=100)
    created_at: datetime = Field(default_factory=get_utc_time)
    updated_at: datetime = Field(default_factory=get_utc_time)
