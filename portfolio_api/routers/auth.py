from fastapi import APIRouter, Depends
from sqlmodel import Session

from portfolio_api.dependencies import get_current_admin, get_db
from portfolio_api.models.admin import Admin
from portfolio_api.schemas.admin import (
    AdminRead,
    ChangePasscodeRequest,
    ChangePasscodeResponse,
    LoginRequest,
    LoginResponse,
)
from portfolio_api.services.auth_service import change_passcode, login_admin


router = APIRouter(
    prefix="/api/auth",
    tags=["authentication"],
)


@router.post("/login", response_model=LoginResponse)
def login_endpoint(credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Log in with the shared admin passcode.
    Returns a bearer token valid for 24 hours together with the admin's id and
    name, or 401 if the passcode does not match.
    """
    return login_admin(db=db, passcode=credentials.passcode)


@router.get("/me", response_model=AdminRead)
def read_me_endpoint(current_admin: Admin = Depends(get_current_admin)):
    """Return the profile of the admin the token was issued to."""
    return current_admin


@router.put("/change-passcode", response_model=ChangePasscodeResponse)
def change_passcode_endpoint(
    request: ChangePasscodeRequest,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    """
    Change the current admin's passcode.
    The new passcode must be at least 6 characters; the old one is not required.
    """
    admin = change_passcode(db=db, admin=current_admin, new_passcode=request.new_passcode)
    return {
        "message": "Passcode updated successfully",
        "admin": {"id": admin.id, "name": admin.name},
    }
