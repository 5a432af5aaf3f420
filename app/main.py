# app/main.py
import uvicorn
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from app.core.config import Settings, get_settings_from_env
from app.core.database import build_engine, build_session_factory, create_db_and_tables
from app.core.exceptions import AppError, StoreError
from app.api.v1.api import api_router
from app.api.v1.routes.dashboard import welcome_router

logger = logging.getLogger(__name__)


def _message(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return _message(exc.status_code, exc.message, exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _message(400, _validation_message(exc))

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return _message(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Store error on {request.method} {request.url.path}: {str(exc)}")
        return _message(StoreError.status_code, StoreError.default_message)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return _message(500, "Internal server error")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit settings object."""
    if settings is None:
        settings = get_settings_from_env()

    logging.basicConfig(level=settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        if settings.CREATE_TABLES_ON_STARTUP:
            await create_db_and_tables(engine)
            logger.info("Database tables created")
        logger.info(f"{settings.APP_NAME} {settings.VERSION} started ({settings.ENVIRONMENT})")
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Database engine disposed")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    # ------------------------------------------------------------
    # ROOT AND HEALTH ENDPOINTS
    # ------------------------------------------------------------
    @app.get("/", tags=["Root"])
    async def root():
        return {
            "message": f"{settings.APP_NAME} is running!",
            "version": settings.VERSION,
        }

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        try:
            async with request.app.state.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {str(e)}")
            return JSONResponse(
                status_code=503,
                content={"status": "unhealthy", "version": settings.VERSION, "environment": settings.ENVIRONMENT},
            )
        return {
            "status": "healthy",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
        }

    # ------------------------------------------------------------
    # BUSINESS LOGIC ROUTES
    # ------------------------------------------------------------
    app.include_router(api_router, prefix="/api/v1")
    app.include_router(welcome_router)

    return app


if __name__ == "__main__":
    settings = get_settings_from_env()
    uvicorn.run("app.main:create_app", factory=True, host=settings.HOST, port=settings.PORT, reload=False)
