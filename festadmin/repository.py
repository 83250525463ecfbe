"""Registration repository for data access.

Handles all document store operations on registration records. Every
operation reissues ``connect()`` (idempotent) before touching the store.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pocketbase.client import ClientResponseError  # type: ignore[attr-defined]

from .errors import RegistrationNotFoundError, StoreError
from .logging_config import TRACE
from .models import Participant, Registration
from .store import StoreConnector

logger = logging.getLogger(__name__)


def event_filter(event: str) -> str:
    """Build an exact-match PocketBase filter for an event name."""
    escaped = event.replace("\\", "\\\\").replace('"', '\\"')
    return f'event = "{escaped}"'


class RegistrationRepository:
    """Repository for Registration data access"""

    def __init__(self, connector: StoreConnector) -> None:
        """Initialize repository with the shared store connector.

        Args:
            connector: Process-wide StoreConnector
        """
        self.connector = connector

    def _records(self) -> Any:
        client = self.connector.connect()
        return client.collection(self.connector.collection)

    def list_all(self) -> list[Registration]:
        """Return every registration in store order."""
        try:
            records = self._records().get_full_list()
        except ClientResponseError as e:
            raise StoreError(f"Failed to list registrations: {e}") from e

        return [Registration.from_record(r) for r in records]

    def list_by_event(self, event: str) -> list[Registration]:
        """Return registrations whose event matches exactly (case-sensitive).

        The result is narrowed again here so the match stays exact whatever
        collation the store applies to the filter.
        """
        query_params = {"filter": event_filter(event)}
        logger.log(TRACE, f"Listing registrations with params: {query_params}")

        try:
            records = self._records().get_full_list(query_params=query_params)
        except ClientResponseError as e:
            raise StoreError(f"Failed to list registrations for event '{event}': {e}") from e

        registrations = [Registration.from_record(r) for r in records]
        return [r for r in registrations if r.event == event]

    def get_by_id(self, registration_id: str) -> Registration:
        """Fetch a single registration.

        Raises:
            RegistrationNotFoundError: If no record has that ID
            StoreError: On any other store failure
        """
        try:
            record = self._records().get_one(registration_id)
        except ClientResponseError as e:
            if e.status == 404:
                raise RegistrationNotFoundError(registration_id) from e
            raise StoreError(f"Failed to get registration {registration_id}: {e}") from e

        return Registration.from_record(record)

    def update_participants(self, registration_id: str, participants: Sequence[Participant]) -> Registration:
        """Replace the participant list of a registration.

        Only the ``participants`` field is sent; team and event are never
        touched here.

        Returns:
            The updated registration as stored

        Raises:
            RegistrationNotFoundError: If no record has that ID
            StoreError: On any other store failure
        """
        data = {"participants": [p.to_document() for p in participants]}

        try:
            record = self._records().update(registration_id, data)
        except ClientResponseError as e:
            if e.status == 404:
                raise RegistrationNotFoundError(registration_id) from e
            raise StoreError(f"Failed to update registration {registration_id}: {e}") from e

        logger.info(f"Updated participants of registration {registration_id} ({len(participants)} participants)")
        return Registration.from_record(record)

    def delete_by_id(self, registration_id: str) -> None:
        """Permanently delete a registration.

        Deleting an ID that does not exist succeeds silently.

        Raises:
            StoreError: On any store failure other than a missing record
        """
        try:
            self._records().delete(registration_id)
        except ClientResponseError as e:
            if e.status == 404:
                logger.info(f"Registration {registration_id} already absent, nothing to delete")
                return
            raise StoreError(f"Failed to delete registration {registration_id}: {e}") from e

        logger.info(f"Deleted registration {registration_id}")
