"""Tests for the Firestore document store adapter (client mocked)."""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.api_core import exceptions as google_exceptions
from google.api_core.datetime_helpers import DatetimeWithNanoseconds
from google.cloud.firestore_v1.base_query import FieldFilter, Or

from neo_docstore.config import DocstoreSettings
from neo_docstore.core.exceptions import DocumentMissingError, InvalidCursorError
from neo_docstore.features.database import (
    DOCUMENT_ID,
    FieldPredicate,
    FilterOperator,
    FirestoreDocumentStore,
    SortOrder,
    StoreQuery,
    create_firestore_client,
)


def snapshot(document_id, data=None, exists=True):
    snap = MagicMock()
    snap.id = document_id
    snap.exists = exists
    snap.to_dict.return_value = data
    return snap


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def collection(client):
    return client.collection.return_value


@pytest.fixture
def store(client):
    return FirestoreDocumentStore(client)


class TestFirestoreDocumentOperations:
    """Document-level calls."""

    @pytest.mark.asyncio
    async def test_insert_with_generated_id(self, store, collection):
        doc_ref = MagicMock()
        doc_ref.get = AsyncMock(return_value=snapshot("gen", {"name": "a"}))
        collection.add = AsyncMock(return_value=(MagicMock(), doc_ref))

        document = await store.insert("items", {"name": "a"})

        collection.add.assert_awaited_once_with({"name": "a"})
        assert document.id == "gen"
        assert document.data == {"name": "a"}

    @pytest.mark.asyncio
    async def test_insert_with_explicit_id(self, store, collection):
        doc_ref = collection.document.return_value
        doc_ref.set = AsyncMock()
        doc_ref.get = AsyncMock(return_value=snapshot("x", {"name": "a"}))

        document = await store.insert("items", {"name": "a"}, document_id="x")

        collection.document.assert_called_with("x")
        doc_ref.set.assert_awaited_once_with({"name": "a"})
        assert document.id == "x"

    @pytest.mark.asyncio
    async def test_get_missing(self, store, collection):
        collection.document.return_value.get = AsyncMock(return_value=snapshot("x", exists=False))

        assert await store.get("items", "x") is None

    @pytest.mark.asyncio
    async def test_update_missing_document(self, store, collection):
        collection.document.return_value.update = AsyncMock(
            side_effect=google_exceptions.NotFound("no document")
        )

        with pytest.raises(DocumentMissingError) as exc_info:
            await store.update("items", "x", {"name": "b"})

        assert isinstance(exc_info.value.__cause__, google_exceptions.NotFound)

    @pytest.mark.asyncio
    async def test_remove_checks_existence(self, store, collection):
        doc_ref = collection.document.return_value
        doc_ref.get = AsyncMock(return_value=snapshot("x", exists=False))
        doc_ref.delete = AsyncMock()

        with pytest.raises(DocumentMissingError):
            await store.remove("items", "x")
        doc_ref.delete.assert_not_awaited()


class TestFirestoreQueries:
    """Translation of store queries into native queries."""

    def test_field_filter_translation(self, store, collection):
        query = StoreQuery("items").where("tags", "array-contains-any", ["a", "b"])

        store._apply_predicates(query)

        native_filter = collection.where.call_args.kwargs["filter"]
        assert isinstance(native_filter, FieldFilter)
        assert native_filter.field_path == "tags"
        assert native_filter.op_string == "array_contains_any"
        assert native_filter.value == ["a", "b"]

    def test_or_group_translation(self, store, collection):
        query = StoreQuery("items").where_any((
            FieldPredicate("status", FilterOperator.EQUAL, "active"),
            FieldPredicate("score", FilterOperator.GREATER_THAN, 10),
        ))

        store._apply_predicates(query)

        native_filter = collection.where.call_args.kwargs["filter"]
        assert isinstance(native_filter, Or)
        assert [f.op_string for f in native_filter.filters] == ["==", ">"]

    def test_document_id_values_become_references(self, store, collection):
        query = StoreQuery("items").where(DOCUMENT_ID, "in", ["a", "b"])

        store._apply_predicates(query)

        collection.document.assert_any_call("a")
        collection.document.assert_any_call("b")
        native_filter = collection.where.call_args.kwargs["filter"]
        assert native_filter.value == [collection.document.return_value] * 2

    @pytest.mark.asyncio
    async def test_query_applies_order_cursor_and_limit(self, store, collection):
        cursor_snapshot = snapshot("c1", {"n": 1})
        collection.document.return_value.get = AsyncMock(return_value=cursor_snapshot)
        ordered = collection.order_by.return_value
        paged = ordered.start_after.return_value.limit.return_value
        paged.get = AsyncMock(return_value=[snapshot("c2", {"n": 2})])

        query = StoreQuery("items").order_by("n", SortOrder.DESC).start_after("c1").limit(5)
        documents = await store.query(query)

        collection.order_by.assert_called_once_with("n", direction="DESCENDING")
        ordered.start_after.assert_called_once_with(cursor_snapshot)
        ordered.start_after.return_value.limit.assert_called_once_with(5)
        assert [d.id for d in documents] == ["c2"]

    @pytest.mark.asyncio
    async def test_query_with_dangling_cursor(self, store, collection):
        collection.document.return_value.get = AsyncMock(return_value=snapshot("gone", exists=False))

        with pytest.raises(InvalidCursorError):
            await store.query(StoreQuery("items").start_after("gone"))

    @pytest.mark.asyncio
    async def test_count_uses_aggregation(self, store, collection):
        aggregation = collection.where.return_value.count.return_value
        aggregation.get = AsyncMock(return_value=[[MagicMock(value=7)]])

        total = await store.count(StoreQuery("items").where("status", "==", "active").limit(2))

        collection.where.return_value.count.assert_called_once_with(alias="total")
        assert total == 7


class TestFirestoreValues:
    """Temporal conversion."""

    def test_normalize_value_strips_nanosecond_type(self, store):
        value = DatetimeWithNanoseconds(2024, 1, 2, 3, 4, 5, nanosecond=123456789, tzinfo=timezone.utc)

        result = store.normalize_value({"at": value, "list": [value]})

        assert type(result["at"]) is datetime
        assert result["at"] == datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
        assert type(result["list"][0]) is datetime

    def test_to_native_datetime_is_aware(self, store):
        assert store.to_native_datetime(datetime(2024, 1, 1)).tzinfo is not None


class TestCreateFirestoreClient:
    """Client construction from settings."""

    def test_emulator_host_is_exported(self, mocker, monkeypatch):
        monkeypatch.setenv("FIRESTORE_EMULATOR_HOST", "placeholder")
        async_client = mocker.patch(
            "neo_docstore.features.database.adapters.firestore_store.firestore.AsyncClient"
        )
        settings = DocstoreSettings(
            _env_file=None,
            firestore_project_id="demo-project",
            firestore_emulator_host="localhost:8080",
        )

        create_firestore_client(settings)

        assert os.environ["FIRESTORE_EMULATOR_HOST"] == "localhost:8080"
        async_client.assert_called_once_with(
            project="demo-project", credentials=None, database="(default)"
        )

    def test_service_account_credentials(self, mocker, monkeypatch):
        monkeypatch.delenv("FIRESTORE_EMULATOR_HOST", raising=False)
        async_client = mocker.patch(
            "neo_docstore.features.database.adapters.firestore_store.firestore.AsyncClient"
        )
        from_file = mocker.patch(
            "neo_docstore.features.database.adapters.firestore_store."
            "service_account.Credentials.from_service_account_file"
        )
        settings = DocstoreSettings(
            _env_file=None,
            firestore_project_id="prod-project",
            google_application_credentials="/secrets/sa.json",
        )

        create_firestore_client(settings)

        from_file.assert_called_once_with("/secrets/sa.json")
        assert async_client.call_args.kwargs["credentials"] is from_file.return_value
