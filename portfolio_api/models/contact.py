from sqlalchemy import Column, Text
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List
from datetime import datetime

from portfolio_api.utils.time_utils import get_utc_time


class Contact(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    message: str = Field(sa_column=Column(Text, nullable=False))
    read: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=get_utc_time, index=True)

    replies: List["Reply"] = Relationship(
        back_populates="contact",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "Reply.id",
        },
    )


class Reply(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    contact_id: int = Field(foreign_key="contact.id", index=True)
    message: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=get_utc_time)

    contact: Optional[Contact] = Relationship(back_populates="replies")
