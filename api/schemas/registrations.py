"""
Pydantic schemas for registration endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from festadmin.models import Participant, Registration


class UpdateRegistrationRequest(BaseModel):
    """Request body for replacing a registration's participants.

    Both fields are optional here so that a missing one is answered with
    400 by the service rather than a schema error.
    """

    id: str | None = None
    participants: list[Participant] | None = None


class RegistrationListEnvelope(BaseModel):
    """Success envelope for the registration list."""

    success: bool = True
    data: list[Registration]


class RegistrationEnvelope(BaseModel):
    """Success envelope carrying a single updated registration."""

    success: bool = True
    data: Registration


class EventInfo(BaseModel):
    """A catalogue event with its advisory team size."""

    name: str
    expected_participants: int = Field(..., description="Advisory only; not enforced")


class EventListEnvelope(BaseModel):
    """Success envelope for the event catalogue."""

    success: bool = True
    data: list[EventInfo]


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class ErrorEnvelope(BaseModel):
    """Failure envelope; the error text is always generic."""

    success: bool = False
    error: str
