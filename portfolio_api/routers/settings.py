from fastapi import APIRouter, Depends
from sqlmodel import Session

from portfolio_api.crud.content import get_singleton, upsert_singleton
from portfolio_api.dependencies import get_current_admin, get_db
from portfolio_api.models.admin import Admin
from portfolio_api.models.content import SiteSettings
from portfolio_api.schemas.admin import ChangePasscodeRequest, ChangePasscodeResponse
from portfolio_api.schemas.content import SettingsRead, SettingsUpdate
from portfolio_api.services.auth_service import change_passcode


router = APIRouter(
    prefix="/api/settings",
    tags=["settings"],
)


@router.get("")
def read_settings_endpoint(db: Session = Depends(get_db)):
    """
    Retrieve site settings (about text, resume and social links).
    Returns an empty object until settings have been saved once.
    """
    settings = get_singleton(db, SiteSettings)
    if settings is None:
        return {}
    return SettingsRead.model_validate(settings)


@router.put("", response_model=SettingsRead)
def update_settings_endpoint(
    settings: SettingsUpdate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Create or replace the site settings.
    Links left out of the request are cleared.
    """
    return upsert_singleton(db, SiteSettings, settings.model_dump())


@router.put("/change-passcode", response_model=ChangePasscodeResponse)
def change_passcode_endpoint(
    request: ChangePasscodeRequest,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    """Same operation as PUT /api/auth/change-passcode, used by the settings page."""
    admin = change_passcode(db=db, admin=current_admin, new_passcode=request.new_passcode)
    return {
        "message": "Passcode updated successfully",
        "admin": {"id": admin.id, "name": admin.name},
    }
