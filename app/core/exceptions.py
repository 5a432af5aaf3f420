# app/core/exceptions.py
"""
Domain errors raised by the services and the access guard.

Each error carries the HTTP status it maps to; the handlers registered in
app.main render them as {"message": ...}.
"""
from typing import Dict, Optional


class AppError(Exception):
    """Base exception for request-terminating failures."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed input, e.g. an unknown transaction type."""
    status_code = 400
    default_message = "Invalid request"


class ConflictError(AppError):
    """Attempted to register an email that already exists."""
    status_code = 400
    default_message = "User already exists"


class InvalidCredentialsError(AppError):
    """Unknown email or wrong password. Never says which."""
    status_code = 400
    default_message = "Invalid email or password"


class UnauthorizedError(AppError):
    """No bearer token on a protected request."""
    status_code = 401
    default_message = "Token missing"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(AppError):
    """Bearer token present but invalid, tampered or expired."""
    status_code = 403
    default_message = "Invalid token"


class NotFoundError(AppError):
    """Record missing or owned by someone else."""
    status_code = 404
    default_message = "Expense not found or not authorized"


class StoreError(AppError):
    """Underlying persistence failure."""
    status_code = 500
    default_message = "Database error"
