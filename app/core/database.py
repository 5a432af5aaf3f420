# app/core/database.py
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from fastapi import Request
from .config import Settings
import logging
from typing import AsyncGenerator

logger = logging.getLogger(__name__)

# Base class for all models
Base = declarative_base()


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database."""
    engine_kwargs = {
        "echo": False,
        "future": True,
    }

    if settings.is_sqlite:
        # aiosqlite connections are used from the event loop thread only
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    else:
        engine_kwargs.update({
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,  # Seconds to wait for a free connection
            "pool_pre_ping": True,    # Check connection before using
            "pool_recycle": 300,      # Recycle connections after 5 minutes
        })

    return create_async_engine(settings.DATABASE_URL, **engine_kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )


async def create_db_and_tables(engine: AsyncEngine) -> None:
    # Register the models on Base.metadata before creating
    from app.models import transaction, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# Dependency to get DB session with proper exception handling
async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    session = request.app.state.session_factory()
    try:
        yield session
    except SQLAlchemyError as e:
        # Log the error and rollback
        logger.error(f"Database session error: {str(e)}")
        await session.rollback()
        raise
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
        logger.debug("Database session closed")
