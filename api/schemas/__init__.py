"""
Pydantic schemas for the fest admin API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .registrations import (
    ErrorEnvelope,
    EventInfo,
    EventListEnvelope,
    MessageResponse,
    RegistrationEnvelope,
    RegistrationListEnvelope,
    UpdateRegistrationRequest,
)

__all__ = [
    "ErrorEnvelope",
    "EventInfo",
    "EventListEnvelope",
    "MessageResponse",
    "RegistrationEnvelope",
    "RegistrationListEnvelope",
    "UpdateRegistrationRequest",
]
