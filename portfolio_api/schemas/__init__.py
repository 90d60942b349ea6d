from .admin import (
    AdminRead,
    AdminSummary,
    ChangePasscodeRequest,
    ChangePasscodeResponse,
    LoginRequest,
    LoginResponse,
)
from .base import CamelModel, MessageResponse
from .contact import ContactCreate, ContactRead, ReplyCreate, ReplyRead, UnreadCount
from .content import (
    AboutRead,
    AboutUpdate,
    HeroRead,
    HeroUpdate,
    SettingsRead,
    SettingsUpdate,
)
from .education import EducationCreate, EducationRead, EducationUpdate
from .project import ProjectCreate, ProjectRead, ProjectUpdate
from .skill import SkillCategory, SkillCreate, SkillRead, SkillUpdate

__all__ = [
    "AboutRead",
    "AboutUpdate",
    "AdminRead",
    "AdminSummary",
    "CamelModel",
    "ChangePasscodeRequest",
    "ChangePasscodeResponse",
    "ContactCreate",
    "ContactRead",
    "EducationCreate",
    "EducationRead",
    "EducationUpdate",
    "HeroRead",
    "HeroUpdate",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "ReplyCreate",
    "ReplyRead",
    "SettingsRead",
    "SettingsUpdate",
    "SkillCategory",
    "SkillCreate",
    "SkillRead",
    "SkillUpdate",
    "UnreadCount",
]
