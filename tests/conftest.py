"""
Root test configuration and fixtures for fest-admin.

This conftest.py provides common fixtures for all test categories:
- unit/: Fast, isolated unit tests (no store required)

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Never reach for a real store during tests
os.environ.setdefault("SKIP_STORE_CONNECT", "true")


def create_mock_pocketbase(records: list | None = None) -> Mock:
    """Create a mock PocketBase client whose collections share one mock."""
    mock_pb = Mock()
    mock_collection = Mock()

    mock_list_response = Mock()
    mock_list_response.items = list(records or [])
    mock_list_response.total_items = len(mock_list_response.items)

    mock_collection.auth_with_password = Mock(return_value=True)
    mock_collection.get_full_list = Mock(return_value=list(records or []))
    mock_collection.get_list = Mock(return_value=mock_list_response)
    mock_collection.get_one = Mock()
    mock_collection.update = Mock()
    mock_collection.delete = Mock(return_value=True)

    mock_pb.collection = Mock(return_value=mock_collection)
    return mock_pb


@pytest.fixture
def mock_pocketbase() -> Mock:
    """Create a mock PocketBase instance for tests that need it."""
    return create_mock_pocketbase()


@pytest.fixture
def connector(mock_pocketbase: Mock):
    """A StoreConnector that hands out the mock PocketBase client."""
    from festadmin.store import StoreConnector

    return StoreConnector(url="http://store.test", client_factory=lambda url: mock_pocketbase)


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Reset cached settings and the process-wide connector between tests."""
    from api.dependencies import reset_connector
    from api.settings import get_settings

    get_settings.cache_clear()
    reset_connector()
    yield
    get_settings.cache_clear()
    reset_connector()
