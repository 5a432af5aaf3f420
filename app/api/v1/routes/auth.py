# app/api/v1/routes/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_settings
from app.core.config import Settings
from app.core.database import get_async_session
from app.schemas.common import Message
from app.schemas.user import Token, UserCredentials
from app.services import auth as auth_service

router = APIRouter(tags=["Authentication"])

@router.post("/register", response_model=Message, status_code=status.HTTP_201_CREATED)
async def register(
    credentials: UserCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
):
    await auth_service.register(
        db, credentials.email, credentials.password, rounds=settings.BCRYPT_ROUNDS
    )
    return {"message": "User registered successfully"}

@router.post("/login", response_model=Token)
async def login(
    credentials: UserCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
):
    """Exchange email and password for a bearer token valid for 30 days."""
    token = await auth_service.login(db, credentials.email, credentials.password, settings)
    return {"message": "Login successful", "token": token}
