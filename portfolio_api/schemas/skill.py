from enum import Enum
from datetime import datetime
from pydantic import ConfigDict, Field

from portfolio_api.schemas.base import CamelModel


class SkillCategory(str, Enum):
    LANGUAGES = "languages"
    FRONTEND = "frontend"
    BACKEND = "backend"
    TOOLS = "tools"
    OTHER = "other"


class SkillBase(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    category: SkillCategory
    devicon: str

    model_config = ConfigDict(use_enum_values=True)


class SkillCreate(SkillBase):
    pass


class SkillUpdate(SkillBase):
    pass


class SkillRead(SkillBase):
    id: int
    created_at: datetime
    updated_at: datetime
