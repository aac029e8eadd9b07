from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``fields`` maps each offending field name to a short reason.
    """

    def __init__(self, message: str, fields: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.fields = dict(fields or {})


class DuplicateNameError(DomainError):
    """Raised when a company or department name is already taken."""


class DuplicateUsernameError(DomainError):
    """Raised when a username is already registered."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class AuthenticationError(DomainError):
    """Raised when the caller cannot be authenticated."""


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials are invalid."""


class MissingTokenError(AuthenticationError):
    """Raised when a request carries no bearer token."""


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is malformed or its signature is wrong."""


class ExpiredTokenError(InvalidTokenError):
    """Raised when a bearer token is past its expiration."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class AdminRequiredError(AuthorizationError):
    """Raised when an action needs the admin role."""


class StorageError(DomainError):
    """Raised when the snapshot file cannot be read or written."""
