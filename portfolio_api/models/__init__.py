# Import all models to make them available from portfolio_api.models
from portfolio_api.models.admin import Admin
from portfolio_api.models.contact import Contact, Reply
from portfolio_api.models.content import AboutSection, HeroSection, SiteSettings
from portfolio_api.models.education import Education
from portfolio_api.models.project import Project
from portfolio_api.models.skill import Skill


# Export all models
__all__ = [
    "Admin",
    "AboutSection",
    "Contact",
    "Education",
    "HeroSection",
    "Project",
    "Reply",
    "SiteSettings",
    "Skill",
]
