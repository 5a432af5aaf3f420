# app/core/security.py
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional
import uuid

import jwt
from passlib.context import CryptContext

from .config import Settings
from .exceptions import ForbiddenError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@lru_cache(maxsize=None)
def password_context(rounds: int = 10) -> CryptContext:
    """One hashing context per bcrypt cost factor."""
    return pwd_context.copy(bcrypt__rounds=rounds)


@dataclass(frozen=True)
class CurrentUser:
    """Identity decoded from a valid session token."""
    id: uuid.UUID
    email: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str, rounds: int = 10) -> str:
    return password_context(rounds).hash(password)


def dummy_verify_password(rounds: int = 10) -> None:
    # Spend the same bcrypt time as a real check when the email is unknown
    password_context(rounds).dummy_verify()


def create_access_token(
    user_id: uuid.UUID,
    email: str,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed session token for the given user.

    The token is the only proof of authentication: nothing is stored
    server-side and it stays valid until it expires.
    """
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    payload = {
        "email": email,
        "id": str(user_id),
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> CurrentUser:
    """
    Verify a session token and return the identity it carries.

    Expired, tampered and malformed tokens all raise ForbiddenError with
    the same message.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require": ["exp", "id", "email"]},
        )
        return CurrentUser(id=uuid.UUID(str(payload["id"])), email=str(payload["email"]))
    except jwt.ExpiredSignatureError:
        logger.debug("Rejected expired token")
        raise ForbiddenError()
    except jwt.InvalidTokenError as e:
        logger.debug(f"Rejected invalid token: {str(e)}")
        raise ForbiddenError()
    except ValueError:
        logger.debug("Rejected token with malformed user id")
        raise ForbiddenError()
