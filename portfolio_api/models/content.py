# Singleton content rows: each table holds at most one row, keyed by SINGLETON_ID
from sqlalchemy import Column, JSON, Text
from sqlmodel import SQLModel, Field
from typing import Optional, List
from datetime import datetime

from portfolio_api.utils.time_utils import get_utc_time

SINGLETON_ID = 1


class HeroSection(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    roles: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=get_utc_time)
    updated_at: datetime = Field(default_factory=get_utc_time)


class AboutSection(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=get_utc_time)
    updated_at: datetime = Field(default_factory=get_utc_time)


class SiteSettings(SQLModel, table=True):
    __tablename__ = "settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    about_text: Optional[str] = Field(default=None, sa_column=Column(Text))
    resume_url: Optional[str] = Field(default=None)
    github_url: Optional[str] = Field(default=None)
    linkedin_url: Optional[str] = Field(default=None)
    twitter_url: Optional[str] = Field(default=None)
    email_address: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=get_utc_time)
    updated_at: datetime = Field(default_factory=get_utc_time)
