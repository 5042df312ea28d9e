"""
Custom exceptions for lexibridge.

Lookups that find nothing never raise; they return None or an empty list.
Backend failures other than constraint violations (connectivity, malformed
statements) propagate as the original SQLAlchemy exceptions.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError


class LexibridgeException(Exception):
    """Base exception for all lexibridge exceptions."""
    pass


class ValidationError(LexibridgeException):
    """Raised when input to a repository operation is invalid."""
    pass


class ConfigurationError(LexibridgeException):
    """Raised when required configuration is missing."""
    pass


class UnsupportedBackendError(LexibridgeException):
    """Raised when the session is bound to a database without native upsert."""
    pass


class ConflictError(LexibridgeException):
    """Raised when there's a conflict (e.g., duplicate entry)."""
    pass


class ConstraintViolationError(ConflictError):
    """Raised when an insert violates a uniqueness or foreign-key constraint."""

    def __init__(self, message: str, original: Optional[IntegrityError] = None):
        super().__init__(message)
        self.original = original
