"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    ErrorKind,
    AppError,
    ServiceValidationError,
    NotFoundError,
    StoreError,
    StoreConnectionError,
)

__all__ = [
    "settings",
    "ErrorKind",
    "AppError",
    "ServiceValidationError",
    "NotFoundError",
    "StoreError",
    "StoreConnectionError",
]
