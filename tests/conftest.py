"""Pytest configuration and fixtures for neo-docstore tests."""

import json
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from neo_docstore.features.database import InMemoryDocumentStore


class TickingClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: Optional[datetime] = None):
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def memory_store():
    """In-memory document store with native OR support."""
    return InMemoryDocumentStore()


@pytest.fixture
def store_without_or():
    """In-memory document store that reports no OR support."""
    return InMemoryDocumentStore(supports_or_queries=False)


@pytest.fixture
def clock():
    """Ticking clock starting at 2024-01-01T00:00:00Z."""
    return TickingClock()


@pytest.fixture
def mock_store():
    """Mock document store for interaction tests."""
    store = AsyncMock()
    store.supports_or_queries = True
    store.to_native_datetime = MagicMock(side_effect=lambda value: value)
    store.normalize_value = MagicMock(side_effect=lambda value: value)
    store.query.return_value = []
    store.count.return_value = 0
    return store


@pytest.fixture
def seed():
    """Insert documents with explicit ids; live unless ``deletedAt`` is given."""
    async def _seed(store, collection: str, documents: Iterable[Dict[str, Any]]):
        for document in documents:
            data = dict(document)
            document_id = data.pop("id")
            data.setdefault("deletedAt", None)
            await store.insert(collection, data, document_id=document_id)
    return _seed


@pytest.fixture
def make_request():
    """Build a starlette request with query, path params and a JSON body."""
    def _make(
        query: str = "",
        path_params: Optional[Dict[str, str]] = None,
        body: Any = None,
        raw_body: Optional[bytes] = None,
        method: str = "GET",
    ) -> Request:
        if raw_body is None:
            raw_body = json.dumps(body).encode() if body is not None else b""

        scope = {
            "type": "http",
            "method": method,
            "path": "/",
            "headers": [(b"content-type", b"application/json")],
            "query_string": query.encode(),
            "path_params": path_params or {},
        }

        async def receive():
            return {"type": "http.request", "body": raw_body, "more_body": False}

        return Request(scope, receive)
    return _make
