"""
Shared dependencies for the fest admin API.

This module provides:
- The process-wide store connector (built lazily from settings)
- FastAPI dependency functions for the repository and service
  (override them via ``app.dependency_overrides`` in tests)
"""

from __future__ import annotations

import threading

from festadmin.repository import RegistrationRepository
from festadmin.store import StoreConnector

from .services.registration_service import RegistrationService
from .settings import get_settings

# ========================================
# Store Connector
# ========================================

_connector: StoreConnector | None = None
_connector_lock = threading.Lock()


def get_connector() -> StoreConnector:
    """Return the process-wide store connector, creating it on first use.

    Creating the connector does not open a connection; that happens on the
    first ``connect()``.
    """
    global _connector
    if _connector is None:
        with _connector_lock:
            if _connector is None:
                settings = get_settings()
                _connector = StoreConnector(
                    url=settings.pocketbase_url,
                    collection=settings.registrations_collection,
                    admin_email=settings.pocketbase_admin_email,
                    admin_password=settings.pocketbase_admin_password,
                )
    return _connector


def reset_connector() -> None:
    """Forget the process-wide connector (used on shutdown and in tests)."""
    global _connector
    with _connector_lock:
        if _connector is not None:
            _connector.reset()
        _connector = None


# ========================================
# Request Dependencies
# ========================================


def get_registration_repository() -> RegistrationRepository:
    """Get a RegistrationRepository bound to the shared connector."""
    return RegistrationRepository(get_connector())


def get_registration_service() -> RegistrationService:
    """Get a RegistrationService instance."""
    return RegistrationService(get_registration_repository(), fest_name=get_settings().fest_name)


__all__ = [
    "get_connector",
    "reset_connector",
    "get_registration_repository",
    "get_registration_service",
]
