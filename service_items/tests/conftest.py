"""
Shared fixtures for item lookup tests.
"""

import json
from unittest.mock import AsyncMock

import pytest

from .helpers import MOCK_ITEM, MOCK_ITEM_ID, OriginStub


@pytest.fixture
def origin():
    """Origin serving the mock item."""
    stub = OriginStub()
    stub.items[MOCK_ITEM_ID] = MOCK_ITEM
    return stub


@pytest.fixture
def cache_store():
    """Backing dict for the Redis double, seeded with the mock item."""
    return {f"items:{MOCK_ITEM_ID}": json.dumps(MOCK_ITEM)}


@pytest.fixture
def mock_redis(cache_store):
    """Redis client double reading from ``cache_store``."""
    client = AsyncMock()

    async def _get(key):
        return cache_store.get(key)

    client.get = AsyncMock(side_effect=_get)
    return client
