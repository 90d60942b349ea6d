from typing import List, Optional
from datetime import date, datetime
from pydantic import Field, model_validator

from portfolio_api.schemas.base import CamelModel


class EducationBase(CamelModel):
    institution: str = Field(min_length=1, max_length=255)
    degree: str = Field(min_length=1, max_length=255)
    field: str = Field(min_length=1, max_length=255)
    start_date: date
    end_date: Optional[date] = None
    grade: Optional[str] = None
    achievements: List[str] = []

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class EducationCreate(EducationBase):
    pass


class EducationUpdate(EducationBase):
    pass


class EducationRead(EducationBase):
    id: int
    created_at: datetime
    updated_at: datetime
