"""Registration service - request validation and response mapping.

The service validates incoming requests, calls the RegistrationRepository,
and turns every outcome into an explicit result type. Results map to the
wire envelope deterministically; internal error detail is logged and never
placed in a response body.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from fastapi.responses import JSONResponse, Response

from festadmin.errors import RegistrationNotFoundError, ValidationError
from festadmin.models import EVENT_DETAILS, Participant
from festadmin.report import build_report, render_pdf

if TYPE_CHECKING:
    from festadmin.repository import RegistrationRepository

logger = logging.getLogger(__name__)

# Public messages - the only error text a caller ever sees
FETCH_FAILED = "Failed to fetch data"
MISSING_ID = "Missing ID"
DELETED = "Deleted successfully"
DELETE_FAILED = "Delete failed"
MISSING_DATA = "Missing data"
NOT_FOUND = "Registration not found"
UPDATE_FAILED = "Update failed"
EXPORT_FAILED = "Export failed"


# ============================================================================
# Result Types
# ============================================================================


@dataclass(frozen=True)
class Ok:
    """Successful outcome carrying the response payload."""

    payload: Any
    enveloped: bool = True

    def to_response(self) -> Response:
        if isinstance(self.payload, ExportedReport):
            return self.payload.to_response()
        content = {"success": True, "data": self.payload} if self.enveloped else self.payload
        return JSONResponse(status_code=200, content=content)


@dataclass(frozen=True)
class Invalid:
    """A required request field was missing; the store was not touched."""

    message: str

    def to_response(self) -> Response:
        return JSONResponse(status_code=400, content={"success": False, "error": self.message})


@dataclass(frozen=True)
class NotFound:
    """The identified registration does not exist."""

    message: str = NOT_FOUND

    def to_response(self) -> Response:
        return JSONResponse(status_code=404, content={"success": False, "error": self.message})


@dataclass(frozen=True)
class Failed:
    """The store was unreachable or the operation failed."""

    message: str

    def to_response(self) -> Response:
        return JSONResponse(status_code=500, content={"success": False, "error": self.message})


ServiceResult = Ok | Invalid | NotFound | Failed


def content_disposition(filename: str) -> str:
    """Build an attachment header that survives any event name.

    The quoted ``filename`` is an ASCII fallback; ``filename*`` carries the
    exact name percent-encoded as UTF-8 (RFC 6266).
    """
    fallback = re.sub(r"[^\x20-\x7e]", "_", filename).replace("\\", "\\\\").replace('"', '\\"')
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


@dataclass(frozen=True)
class ExportedReport:
    """A rendered registration report ready for download."""

    filename: str
    content: bytes

    def to_response(self) -> Response:
        return Response(
            content=self.content,
            media_type="application/pdf",
            headers={"Content-Disposition": content_disposition(self.filename)},
        )


# ============================================================================
# Service
# ============================================================================


class RegistrationService:
    """Registration request handling - fully testable with a mocked repository."""

    def __init__(self, repository: RegistrationRepository, fest_name: str | None = None) -> None:
        """Initialize with repository for data access.

        Args:
            repository: RegistrationRepository instance for data access.
            fest_name: Optional subtitle printed on exported reports.
        """
        self.repository = repository
        self.fest_name = fest_name

    async def list_registrations(self, event: str | None = None) -> ServiceResult:
        """List registrations, filtered by exact event name when given."""
        try:
            if event:
                registrations = await asyncio.to_thread(self.repository.list_by_event, event)
            else:
                registrations = await asyncio.to_thread(self.repository.list_all)
        except Exception as e:
            logger.error(f"Error fetching registrations (event={event!r}): {e}", exc_info=True)
            return Failed(FETCH_FAILED)

        return Ok([r.model_dump(by_alias=True) for r in registrations])

    async def delete_registration(self, registration_id: str | None) -> ServiceResult:
        """Delete a registration by ID.

        A missing ID is rejected before the repository is touched.
        """
        try:
            registration_id = _require(registration_id, MISSING_ID)
        except ValidationError as e:
            return Invalid(str(e))

        try:
            await asyncio.to_thread(self.repository.delete_by_id, registration_id)
        except Exception as e:
            logger.error(f"Error deleting registration {registration_id}: {e}", exc_info=True)
            return Failed(DELETE_FAILED)

        return Ok({"message": DELETED}, enveloped=False)

    async def update_registration(
        self,
        registration_id: str | None,
        participants: Sequence[Participant] | None,
    ) -> ServiceResult:
        """Replace the participant list of a registration.

        An empty participant list is a valid replacement; only an absent one
        is rejected.
        """
        try:
            registration_id = _require(registration_id, MISSING_DATA)
            if participants is None:
                raise ValidationError(MISSING_DATA)
        except ValidationError as e:
            return Invalid(str(e))

        try:
            updated = await asyncio.to_thread(self.repository.update_participants, registration_id, list(participants))
        except RegistrationNotFoundError:
            logger.info(f"Update rejected, registration {registration_id} not found")
            return NotFound()
        except Exception as e:
            logger.error(f"Error updating registration {registration_id}: {e}", exc_info=True)
            return Failed(UPDATE_FAILED)

        return Ok(updated.model_dump(by_alias=True))

    async def list_events(self) -> ServiceResult:
        """Return the event catalogue with advisory participant counts."""
        return Ok([{"name": name, "expected_participants": count} for name, count in EVENT_DETAILS.items()])

    async def export_registrations(self, event: str | None = None) -> ServiceResult:
        """Render the (optionally event-filtered) registrations as a PDF report."""
        try:
            if event:
                registrations = await asyncio.to_thread(self.repository.list_by_event, event)
            else:
                registrations = await asyncio.to_thread(self.repository.list_all)
            report = build_report(registrations, event)
            content = await asyncio.to_thread(render_pdf, report, self.fest_name)
        except Exception as e:
            logger.error(f"Error exporting registrations (event={event!r}): {e}", exc_info=True)
            return Failed(EXPORT_FAILED)

        logger.info(f"Exported {len(registrations)} registrations to {report.filename}")

        return Ok(ExportedReport(filename=report.filename, content=content))


def _require(value: str | None, message: str) -> str:
    if not value:
        raise ValidationError(message)
    return value
