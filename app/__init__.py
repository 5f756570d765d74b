"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    CateringError,
    ServiceValidationError,
    NotFoundError,
)

__all__ = [
    "settings",
    "CateringError",
    "ServiceValidationError",
    "NotFoundError",
]
