# tests/conftest.py
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from src.main import app as fastapi_app
from src.database import get_async_session


class ListCollection:
    """In-memory CountableCollection keyed by shard, recording every call."""

    def __init__(self, shards: dict | None = None):
        self.shards = {shard: list(items) for shard, items in (shards or {}).items()}
        self.count_calls = []
        self.fetch_calls = []

    async def count(self, shard, *, offset=0, limit=None):
        self.count_calls.append((shard, offset, limit))
        rows = self.shards.get(shard, [])[offset:]
        if limit is not None:
            rows = rows[:limit]
        return len(rows)

    async def fetch(self, offset, limit, shard):
        self.fetch_calls.append((offset, limit, shard))
        return self.shards.get(shard, [])[offset:offset + limit]


@pytest.fixture
def make_collection():
    """Build a ListCollection from ``{shard: item_count}`` or ``{shard: [items]}``."""

    def _make_collection(shards: dict) -> ListCollection:
        materialized = {}
        for shard, items in shards.items():
            if isinstance(items, int):
                items = [{"id": shard * 1000 + n, "shard": shard} for n in range(1, items + 1)]
            materialized[shard] = items
        return ListCollection(materialized)

    return _make_collection


@pytest.fixture
def mock_db_session():
    """Provides a mocked async session."""
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def app(mock_db_session) -> AsyncGenerator[FastAPI, None]:
    """FastAPI app whose database dependency yields the mocked session"""

    async def get_test_db():
        yield mock_db_session

    fastapi_app.dependency_overrides[get_async_session] = get_test_db

    yield fastapi_app

    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
