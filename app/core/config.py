# app/core/config.py

from pathlib import Path
from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the project root directory (where .env should be located)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra="ignore"
    )

    # App Configuration
    APP_NAME: str = "Finance Tracker API"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Database Configuration
    DATABASE_URL: str
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: float = 30
    CREATE_TABLES_ON_STARTUP: bool = True

    # JWT / Security Configuration
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 30
    BCRYPT_ROUNDS: int = 10

    # Transactions
    TRANSACTION_LIST_LIMIT: int = 100

    # CORS Configuration
    CORS_ORIGINS: List[str] = []

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def check_bcrypt_rounds(cls, value: int) -> int:
        # bcrypt only accepts log rounds in this range
        if not 4 <= value <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return value

    @field_validator("TRANSACTION_LIST_LIMIT", "ACCESS_TOKEN_EXPIRE_DAYS")
    @classmethod
    def check_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be a positive integer")
        return value

    @property
    def is_sqlite(self) -> bool:
        """Check if we're running against SQLite (tests, local development)"""
        return self.DATABASE_URL.startswith("sqlite")


def get_settings_from_env() -> Settings:
    """Build settings from the environment and the optional .env file."""
    return Settings()
