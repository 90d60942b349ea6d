from typing import List
from datetime import datetime
from pydantic import EmailStr, Field

from portfolio_api.schemas.base import CamelModel


class ContactCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    message: str = Field(min_length=1)


class ReplyCreate(CamelModel):
    message: str = Field(min_length=1)


class ReplyRead(CamelModel):
    id: int
    contact_id: int
    message: str
    created_at: datetime


class ContactRead(CamelModel):
    id: int
    name: str
    email: str
    message: str
    read: bool
    created_at: datetime
    replies: List[ReplyRead] = []


class UnreadCount(CamelModel):
    count: int
