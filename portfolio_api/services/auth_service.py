import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from portfolio_api.config import MIN_PASSCODE_LENGTH
from portfolio_api.crud.admin import get_admin_by_passcode, update_admin_passcode
from portfolio_api.models.admin import Admin
from portfolio_api.utils.authentication import create_access_token

logger = logging.getLogger(__name__)


def login_admin(db: Session, passcode: str) -> Dict[str, Any]:
    """
    Exchange the shared passcode for a bearer token.

    There is no lockout or rate limiting: a wrong passcode simply gets a 401
    and no token. Logging out is up to the client, and a token stays valid
    until it expires.
    """
    admin = get_admin_by_passcode(db, passcode)
    if admin is None:
        logger.warning("Login failed: invalid passcode")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid passcode",
        )

    token = create_access_token(admin.id)
    logger.info(f"Admin {admin.id} logged in")

    return {
        "token": token,
        "admin": {"id": admin.id, "name": admin.name},
    }


def change_passcode(db: Session, admin: Admin, new_passcode: Optional[str]) -> Admin:
    """
    Replace the authenticated admin's passcode.

    The old passcode is not asked for. Values shorter than MIN_PASSCODE_LENGTH
    are rejected before anything is written.
    """
    if not new_passcode:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="New passcode is required",
        )

    if len(new_passcode) < MIN_PASSCODE_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Passcode must be at least {MIN_PASSCODE_LENGTH} characters long",
        )

    holder = get_admin_by_passcode(db, new_passcode)
    if holder is not None and holder.id != admin.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Passcode is already in use",
        )

    admin = update_admin_passcode(db, admin, new_passcode)
    logger.info(f"Admin {admin.id} changed passcode")
    return admin
