from typing import Optional
from datetime import datetime

from portfolio_api.schemas.base import CamelModel


class AdminSummary(CamelModel):
    id: int
    name: str


class AdminRead(AdminSummary):
    created_at: datetime


class LoginRequest(CamelModel):
    passcode: str


class LoginResponse(CamelModel):
    token: str
    admin: AdminSummary


class ChangePasscodeRequest(CamelModel):
    # Length is checked by the service so both change-passcode routes answer alike
    new_passcode: Optional[str] = None


class ChangePasscodeResponse(CamelModel):
    message: str
    admin: AdminSummary
