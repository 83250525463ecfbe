"""
Festadmin - Core registration management for the fest admin panel.

This package contains:
- models: Registration and Participant, plus the event catalogue
- store: Lazily-connected, process-wide PocketBase connector
- repository: CRUD over registration records
- report: Team-grouped registration report and PDF rendering
"""

from festadmin.errors import (
    RegistrationError,
    RegistrationNotFoundError,
    StoreConnectionError,
    StoreError,
    ValidationError,
)
from festadmin.models import EVENT_DETAILS, Participant, Registration
from festadmin.repository import RegistrationRepository
from festadmin.store import StoreConnector

__all__ = [
    "EVENT_DETAILS",
    "Participant",
    "Registration",
    "RegistrationError",
    "RegistrationNotFoundError",
    "RegistrationRepository",
    "StoreConnectionError",
    "StoreConnector",
    "StoreError",
    "ValidationError",
]
