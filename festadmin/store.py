"""Document store connector.

Holds the single PocketBase client shared by every repository in the
process. The client is created on the first ``connect()`` and reused after
that; initialization is lock-guarded so concurrent first callers never build
two clients.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from pocketbase import PocketBase

from .errors import StoreConnectionError

logger = logging.getLogger(__name__)


class StoreConnector:
    """Lazily-established, reusable connection to the registrations store."""

    def __init__(
        self,
        url: str,
        collection: str = "registrations",
        admin_email: str = "",
        admin_password: str = "",
        client_factory: Callable[[str], PocketBase] | None = None,
    ) -> None:
        """Initialize the connector without touching the network.

        Args:
            url: PocketBase server URL
            collection: Collection holding registration records
            admin_email: Optional superuser email for authentication
            admin_password: Optional superuser password for authentication
            client_factory: Builds the client from the URL (defaults to PocketBase)
        """
        self.url = url
        self.collection = collection
        self.admin_email = admin_email
        self.admin_password = admin_password
        self._client_factory = client_factory or PocketBase
        self._client: PocketBase | None = None
        self._lock = threading.Lock()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> PocketBase:
        """Return the live client, establishing it on first use.

        Returns:
            Connected PocketBase client

        Raises:
            StoreConnectionError: If the store is unreachable or misconfigured
        """
        client = self._client
        if client is not None:
            return client

        with self._lock:
            # Another caller may have finished connecting while we waited
            if self._client is not None:
                return self._client

            self._client = self._open()
            return self._client

    def reset(self) -> None:
        """Drop the current client; the next connect() starts over."""
        with self._lock:
            self._client = None

    def _open(self) -> PocketBase:
        if not self.url:
            raise StoreConnectionError("Store URL is not configured")
        if not self.collection:
            raise StoreConnectionError("Registrations collection is not configured")

        try:
            client = self._client_factory(self.url)

            if self.admin_email and self.admin_password:
                client.collection("_superusers").auth_with_password(self.admin_email, self.admin_password)

            # Cheap probe: proves the server answers and the collection exists
            client.collection(self.collection).get_list(1, 1)
        except Exception as e:
            logger.error(f"Failed to connect to store at {self.url}: {e}")
            raise StoreConnectionError(f"Cannot connect to store at {self.url}") from e

        logger.info(f"Connected to store at {self.url} (collection '{self.collection}')")
        return client
