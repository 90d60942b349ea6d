"""
Fill an empty database with demo content.

    python -m portfolio_api.seed

Tables that already hold rows are left alone.
"""
import logging

from sqlmodel import Session, func, select

from portfolio_api.config import ADMIN_NAME, ADMIN_PASSCODE
from portfolio_api.crud.admin import ensure_admin
from portfolio_api.models.project import Project
from portfolio_api.models.skill import Skill

logger = logging.getLogger(__name__)

DEMO_PROJECTS = [
    {
        "title": "AI Chat Application",
        "description": "A real-time chat application with AI-powered features, including "
        "message sentiment analysis and automatic translations.",
        "image_url": "https://picsum.photos/seed/project1/600/400",
        "technologies": ["React", "Node.js", "Socket.io", "TensorFlow.js", "MongoDB"],
        "github_url": "https://github.com",
        "live_url": "https://demo.com",
        "featured": True,
    },
    {
        "title": "E-Commerce Platform",
        "description": "A full-featured e-commerce platform with product search, shopping "
        "cart, payment processing, and admin dashboard.",
        "image_url": "https://picsum.photos/seed/project2/600/400",
        "technologies": ["React", "Redux", "Express", "MongoDB", "Stripe API"],
        "github_url": "https://github.com",
        "live_url": "https://demo.com",
        "featured": True,
    },
    {
        "title": "Cloud File Manager",
        "description": "A secure cloud storage manager with file sharing, previews and "
        "folder synchronisation.",
        "image_url": "https://picsum.photos/seed/project3/600/400",
        "technologies": ["Vue.js", "Firebase", "Node.js"],
        "github_url": "https://github.com",
        "live_url": None,
        "featured": False,
    },
]

DEMO_SKILLS = [
    {"name": "Python", "category": "languages", "devicon": "devicon-python-plain"},
    {"name": "TypeScript", "category": "languages", "devicon": "devicon-typescript-plain"},
    {"name": "React", "category": "frontend", "devicon": "devicon-react-original"},
    {"name": "FastAPI", "category": "backend", "devicon": "devicon-fastapi-plain"},
    {"name": "PostgreSQL", "category": "backend", "devicon": "devicon-postgresql-plain"},
    {"name": "Git", "category": "tools", "devicon": "devicon-git-plain"},
]


def _is_empty(db: Session, model) -> bool:
    return db.exec(select(func.count()).select_from(model)).one() == 0


def seed(db: Session) -> dict:
    """Insert demo rows into empty tables and report how many were added."""
    added = {"projects": 0, "skills": 0}

    if _is_empty(db, Project):
        for data in DEMO_PROJECTS:
            db.add(Project(**data))
        added["projects"] = len(DEMO_PROJECTS)
    else:
        logger.info("Projects already present, skipping")

    if _is_empty(db, Skill):
        for data in DEMO_SKILLS:
            db.add(Skill(**data))
        added["skills"] = len(DEMO_SKILLS)
    else:
        logger.info("Skills already present, skipping")

    db.commit()

    if ADMIN_PASSCODE:
        ensure_admin(db, passcode=ADMIN_PASSCODE, name=ADMIN_NAME)

    return added


if __name__ == "__main__":
    from portfolio_api.dependencies import create_db_and_tables, engine

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    create_db_and_tables()
    with Session(engine) as session:
        result = seed(session)
    logger.info(f"Seed finished: {result}")
