from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an id is not present in the targeted collection."""


class AuthorizationError(DomainError):
    """Raised when the shared admin secret is missing or wrong."""


class CapacityExceededError(DomainError):
    """Raised when a session roster is already at max capacity."""


class ConflictError(DomainError):
    """Raised when a record would duplicate an existing one.

    The existing record is kept on the exception so callers can show it.
    """

    def __init__(self, message: str, existing: Optional[Any] = None):
        super().__init__(message)
        self.existing = existing


class StoreError(Exception):
    """Raised when the underlying record store cannot be read or written."""
