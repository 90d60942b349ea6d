from typing import List, Optional
from datetime import datetime
from pydantic import Field

from portfolio_api.schemas.base import CamelModel


class HeroBase(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    roles: List[str] = []


class HeroUpdate(HeroBase):
    pass


class HeroRead(HeroBase):
    id: int
    created_at: datetime
    updated_at: datetime


class AboutBase(CamelModel):
    content: str


class AboutUpdate(AboutBase):
    pass


class AboutRead(AboutBase):
    id: int
    created_at: datetime
    updated_at: datetime


class SettingsBase(CamelModel):
    about_text: Optional[str] = None
    resume_url: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    twitter_url: Optional[str] = None
    email_address: Optional[str] = None


class SettingsUpdate(SettingsBase):
    pass


class SettingsRead(SettingsBase):
    id: int
    created_at: datetime
    updated_at: datetime
