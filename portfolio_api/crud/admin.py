import logging

from sqlmodel import Session, func, select

from portfolio_api.models.admin import Admin
from portfolio_api.utils.time_utils import get_utc_time

logger = logging.getLogger(__name__)


def get_admin(db: Session, admin_id: int) -> Admin | None:
    """Fetch an admin by primary key, or None if it does not exist."""
    return db.get(Admin, admin_id)


def get_admin_by_passcode(db: Session, passcode: str) -> Admin | None:
    """
    Look up the admin whose stored passcode equals the given string exactly.

    Passcodes are unique, so at most one row can match.
    """
    return db.exec(select(Admin).where(Admin.passcode == passcode)).first()


def count_admins(db: Session) -> int:
    return db.exec(select(func.count()).select_from(Admin)).one()


def update_admin_passcode(db: Session, admin: Admin, new_passcode: str) -> Admin:
    """Overwrite the admin's passcode and bump updated_at."""
    admin.passcode = new_passcode
    admin.updated_at = get_utc_time()

    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


def ensure_admin(db: Session, passcode: str, name: str) -> Admin | None:
    """
    Create the first admin when the table is empty.

    Existing rows are left untouched so a rotated passcode survives restarts.
    Returns the created admin, or None if one already existed.
    """
    if count_admins(db) > 0:
        logger.info("Admin account already exists, skipping seed")
        return None

    admin = Admin(passcode=passcode, name=name)
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Initial admin '{name}' created with id {admin.id}")
    return admin
