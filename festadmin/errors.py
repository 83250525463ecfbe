"""Registration error classes.

The repository raises these; the service layer maps them to HTTP responses.
"""

from __future__ import annotations


class RegistrationError(Exception):
    """Base exception for registration management errors."""

    pass


class ValidationError(RegistrationError):
    """Raised when a required request field is missing."""

    pass


class RegistrationNotFoundError(RegistrationError):
    """Raised when no registration exists for the given ID."""

    def __init__(self, registration_id: str) -> None:
        self.registration_id = registration_id
        super().__init__(f"Registration '{registration_id}' not found")


class StoreError(RegistrationError):
    """Raised when a document store operation fails."""

    pass


class StoreConnectionError(StoreError, ConnectionError):
    """Raised when the document store is unreachable or misconfigured."""

    pass
