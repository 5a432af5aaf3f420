# app/services/auth.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from app.core.config import Settings
from app.core.exceptions import ConflictError, InvalidCredentialsError
from app.core.security import (
    create_access_token,
    dummy_verify_password,
    get_password_hash,
    verify_password,
)
from app.crud.user import create_user, get_user_by_email

logger = logging.getLogger(__name__)


async def register(db: AsyncSession, email: str, password: str, rounds: int = 10) -> None:
    if await get_user_by_email(email, db):
        raise ConflictError()

    # bcrypt is CPU bound; keep it off the event loop
    hashed_password = await run_in_threadpool(get_password_hash, password, rounds=rounds)
    try:
        await create_user(email, hashed_password, db)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        await db.rollback()
        raise ConflictError()
    logger.info(f"User {email} has registered")


async def login(db: AsyncSession, email: str, password: str, settings: Settings) -> str:
    """Check the credentials and return a signed session token."""
    user = await get_user_by_email(email, db)
    if not user:
        await run_in_threadpool(dummy_verify_password, settings.BCRYPT_ROUNDS)
        verified = False
    else:
        verified = await run_in_threadpool(verify_password, password, user.password)

    if not verified:
        logger.info(f"Failed login attempt for {email}")
        raise InvalidCredentialsError()

    logger.info(f"User {email} logged in")
    return create_access_token(user.id, user.email, settings)
