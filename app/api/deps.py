# app/api/deps.py
from datetime import date
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import Settings
from app.core.exceptions import UnauthorizedError
from app.core.security import CurrentUser, decode_access_token

# Security scheme; errors are raised by get_current_user so 401 and 403 stay distinct
optional_security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_today() -> date:
    """Server local date; overridden in tests to pin the current month."""
    return date.today()


async def get_current_user(
    settings: Settings = Depends(get_settings),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
) -> CurrentUser:
    """
    Access guard for protected routes.

    Only the token is checked: no store lookup is made, so a token stays
    valid until it expires (there is no revocation list).
    """
    if not credentials or not credentials.credentials.strip():
        raise UnauthorizedError()

    return decode_access_token(credentials.credentials.strip(), settings)
