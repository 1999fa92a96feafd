"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and the process-scoped application context.
"""

from app.config import settings
from app.exceptions import (
    ServiceValidationError,
    NotFoundError,
    DatabaseError,
    NotConnectedError,
)

__all__ = [
    "settings",
    "ServiceValidationError",
    "NotFoundError",
    "DatabaseError",
    "NotConnectedError",
]
