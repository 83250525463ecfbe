"""
Registrations Router - Registration management endpoints.

This router provides endpoints for listing, editing and deleting fest
registrations, the event catalogue, and the PDF export.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import Response

from ..dependencies import get_registration_service
from ..schemas.registrations import (
    ErrorEnvelope,
    EventListEnvelope,
    MessageResponse,
    RegistrationEnvelope,
    RegistrationListEnvelope,
    UpdateRegistrationRequest,
)
from ..services.registration_service import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/registrations", tags=["registrations"])

_SERVER_ERROR: dict[int | str, dict[str, Any]] = {500: {"model": ErrorEnvelope}}


@router.get(
    "",
    responses={200: {"model": RegistrationListEnvelope}, **_SERVER_ERROR},
)
async def list_registrations(
    event: str | None = Query(None, description="Exact, case-sensitive event name to filter by"),
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    """List registrations, optionally filtered to one event."""
    result = await service.list_registrations(event)
    return result.to_response()


@router.delete(
    "",
    responses={200: {"model": MessageResponse}, 400: {"model": ErrorEnvelope}, **_SERVER_ERROR},
)
async def delete_registration(
    registration_id: str | None = Query(None, alias="id", description="ID of the registration to delete"),
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    """Permanently delete a registration.

    Deleting an ID that no longer exists still reports success.
    """
    result = await service.delete_registration(registration_id)
    return result.to_response()


@router.put(
    "",
    responses={
        200: {"model": RegistrationEnvelope},
        400: {"model": ErrorEnvelope},
        404: {"model": ErrorEnvelope},
        **_SERVER_ERROR,
    },
)
async def update_registration(
    request: UpdateRegistrationRequest | None = Body(None),
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    """Replace the participant list of a registration (team and event are unchanged)."""
    if request is None:
        result = await service.update_registration(None, None)
    else:
        result = await service.update_registration(request.id, request.participants)
    return result.to_response()


@router.get("/events", responses={200: {"model": EventListEnvelope}})
async def list_events(service: RegistrationService = Depends(get_registration_service)) -> Response:
    """List the fest's events with their advisory team sizes."""
    result = await service.list_events()
    return result.to_response()


@router.get(
    "/export",
    responses={200: {"content": {"application/pdf": {}}}, **_SERVER_ERROR},
)
async def export_registrations(
    event: str | None = Query(None, description="Exact event name; omit to export all events"),
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    """Download the team-grouped registration report as a PDF."""
    result = await service.export_registrations(event)
    return result.to_response()
