"""Tests for the paginator facade."""

from datetime import datetime, timezone

import pytest

from neo_docstore.core.exceptions import (
    InvalidCursorError,
    InvalidFilterValueError,
    InvalidPaginationError,
    PaginationError,
    QueryExecutionError,
    UnsupportedFilterError,
)
from neo_docstore.features.database import SortField, SortOrder
from neo_docstore.features.pagination import (
    CompositeFilterGroup,
    DateRange,
    FilterCondition,
    PaginationOptions,
    Paginator,
    encode_cursor,
)

COLLECTION = "items"


def make_documents(count, deleted=0):
    documents = []
    for i in range(count):
        documents.append({
            "id": f"doc{i:02d}",
            "name": f"item {i}",
            "status": "active" if i % 2 == 0 else "inactive",
            "score": i,
            "createdAt": datetime(2024, 1, 1 + i, tzinfo=timezone.utc),
        })
    for i in range(deleted):
        documents.append({
            "id": f"del{i:02d}",
            "name": f"deleted {i}",
            "status": "active",
            "score": 100 + i,
            "createdAt": datetime(2024, 3, 1, tzinfo=timezone.utc),
            "deletedAt": datetime(2024, 4, 1, tzinfo=timezone.utc),
        })
    return documents


@pytest.fixture
def paginator(memory_store):
    return Paginator(memory_store, COLLECTION)


class TestPaginationArithmetic:
    """totalPages, hasNextPage and hasPrevPage."""

    @pytest.mark.asyncio
    async def test_sixteen_items_two_pages(self, paginator, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(16))

        first = await paginator.paginate(PaginationOptions(page=1, limit=10))

        assert first.total == 16
        assert first.total_pages == 2
        assert first.has_next_page is True
        assert first.has_prev_page is False
        assert len(first.data) == 10

        second = await paginator.paginate(
            PaginationOptions(page=2, limit=10, last_visible=first.last_visible)
        )

        assert second.has_next_page is False
        assert second.has_prev_page is True
        assert len(second.data) == 6
        assert {d["id"] for d in first.data}.isdisjoint({d["id"] for d in second.data})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("total,limit,expected_pages", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (7, 3, 3)])
    async def test_total_pages_is_ceiling(self, paginator, memory_store, seed, total, limit, expected_pages):
        await seed(memory_store, COLLECTION, make_documents(total))

        result = await paginator.paginate(PaginationOptions(limit=limit))

        assert result.total_pages == expected_pages
        assert result.has_next_page == (1 < expected_pages)

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(8))
        paginator = Paginator(memory_store, COLLECTION, max_limit=5)

        result = await paginator.paginate(PaginationOptions(limit=50))

        assert result.limit == 5
        assert len(result.data) == 5
        assert result.total_pages == 2

    def test_page_and_limit_must_be_positive(self):
        with pytest.raises(InvalidPaginationError):
            PaginationOptions(page=0)
        with pytest.raises(InvalidPaginationError):
            PaginationOptions(limit=0)


class TestSoftDeleteExclusion:

    @pytest.mark.asyncio
    async def test_deleted_documents_excluded_by_default(self, paginator, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(5, deleted=3))

        live = await paginator.paginate(PaginationOptions(all=True))
        everything = await paginator.paginate(PaginationOptions(all=True, include_soft_deleted=True))

        assert len(live.data) == 5
        assert live.total == 5
        assert len(everything.data) == 8
        assert everything.total == 8

    @pytest.mark.asyncio
    async def test_sum_over_pages_equals_live_count(self, paginator, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(7, deleted=4))

        seen = []
        cursor = None
        page = 1
        while True:
            result = await paginator.paginate(PaginationOptions(page=page, limit=3, last_visible=cursor))
            seen.extend(d["id"] for d in result.data)
            if not result.has_next_page:
                break
            cursor = result.last_visible
            page += 1

        assert len(seen) == 7
        assert all(i.startswith("doc") for i in seen)


class TestValidationFailFast:
    """Bad filters fail before any store call and are never wrapped."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("condition", [
        FilterCondition("status", "==", None),
        FilterCondition("status", "in", []),
        FilterCondition("status", "in", ["x"] * 11),
    ])
    async def test_invalid_filters_issue_no_queries(self, mock_store, condition):
        paginator = Paginator(mock_store, COLLECTION)

        with pytest.raises(InvalidFilterValueError):
            await paginator.paginate(PaginationOptions(filters=[condition]))

        mock_store.query.assert_not_awaited()
        mock_store.count.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_composite_condition(self, mock_store):
        paginator = Paginator(mock_store, COLLECTION)
        options = PaginationOptions(
            composite_filters=[CompositeFilterGroup("and", [FilterCondition("tags", "array-contains", ["a"])])]
        )

        with pytest.raises(InvalidFilterValueError):
            await paginator.paginate(options)
        mock_store.query.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_bad_cursor_is_validation_error(self, mock_store):
        paginator = Paginator(mock_store, COLLECTION)

        with pytest.raises(InvalidCursorError):
            await paginator.paginate(PaginationOptions(last_visible="%%%"))
        mock_store.query.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_dangling_cursor_is_not_wrapped(self, paginator):
        with pytest.raises(InvalidCursorError):
            await paginator.paginate(PaginationOptions(last_visible=encode_cursor("ghost")))

    @pytest.mark.asyncio
    async def test_store_failure_is_wrapped(self, mock_store):
        original = RuntimeError("missing composite index")
        mock_store.query.side_effect = original
        paginator = Paginator(mock_store, COLLECTION)

        with pytest.raises(PaginationError) as exc_info:
            await paginator.paginate(PaginationOptions())

        assert isinstance(exc_info.value, QueryExecutionError)
        assert str(exc_info.value).startswith("Failed to paginate documents")
        assert exc_info.value.__cause__.__cause__ is original


class TestOrComposition:
    """OR groups: native support path and explicit rejection path."""

    @pytest.mark.asyncio
    async def test_or_group_with_native_support(self, paginator, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(6))
        options = PaginationOptions(
            all=True,
            composite_filters=[CompositeFilterGroup("or", [
                FilterCondition("score", "==", 1),
                FilterCondition("score", ">=", 4),
            ])],
        )

        result = await paginator.paginate(options)

        assert sorted(d["score"] for d in result.data) == [1, 4, 5]
        assert result.total == 3

    @pytest.mark.asyncio
    async def test_or_group_rejected_without_support(self, store_without_or, seed):
        await seed(store_without_or, COLLECTION, make_documents(6))
        paginator = Paginator(store_without_or, COLLECTION)
        options = PaginationOptions(
            composite_filters=[CompositeFilterGroup("or", [FilterCondition("score", "==", 1)])]
        )

        with pytest.raises(UnsupportedFilterError):
            await paginator.paginate(options)


class TestProjectionAndMetadata:

    @pytest.mark.asyncio
    async def test_select_returns_only_id_and_fields(self, paginator, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(4))
        await memory_store.insert(COLLECTION, {"score": 99, "deletedAt": None}, document_id="noname")

        result = await paginator.paginate(PaginationOptions(select=["name"], all=True))

        for item in result.data:
            assert set(item) <= {"id", "name"}
            assert "id" in item
        assert {"id": "noname"} in result.data

    @pytest.mark.asyncio
    async def test_full_records_include_id_and_fields(self, paginator, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(1))

        result = await paginator.paginate()

        assert result.data[0]["id"] == "doc00"
        assert result.data[0]["createdAt"] == datetime(2024, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_entity_factory(self, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(2))
        paginator = Paginator(memory_store, COLLECTION, entity_factory=lambda r: ("entity", r["id"]))

        result = await paginator.paginate()

        assert result.data == [("entity", "doc00"), ("entity", "doc01")]

    @pytest.mark.asyncio
    async def test_order_by_is_respected(self, paginator, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(5))

        result = await paginator.paginate(PaginationOptions(order_by=SortField("score", SortOrder.DESC)))

        assert [d["score"] for d in result.data] == [4, 3, 2, 1, 0]

    @pytest.mark.asyncio
    async def test_applied_filters_metadata(self, paginator, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(3))
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        options = PaginationOptions(
            filters=[FilterCondition("status", "==", "active"), FilterCondition("status", "!=", "x")],
            order_by=[SortField("createdAt"), SortField("score", SortOrder.DESC)],
            date_range=DateRange("createdAt", start=start),
        )

        result = await paginator.paginate(options)

        assert result.applied_filters.filters == {"status": "x"}
        assert result.applied_filters.order_by == {"createdAt": "asc", "score": "desc"}
        assert result.applied_filters.date_range == {"field": "createdAt", "start": start, "end": None}
        assert result.execution_time_ms >= 0

    @pytest.mark.asyncio
    async def test_last_visible_empty_page(self, paginator):
        result = await paginator.paginate()

        assert result.data == []
        assert result.last_visible is None
        assert result.total_pages == 0

    @pytest.mark.asyncio
    async def test_to_dict_outbound_shape(self, paginator, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(2))

        payload = (await paginator.paginate()).to_dict()

        assert set(payload) == {
            "data", "total", "page", "limit", "totalPages", "hasNextPage",
            "hasPrevPage", "lastVisible", "executionTime", "appliedFilters",
        }
        assert payload["data"][0]["createdAt"] == "2024-01-01T00:00:00+00:00"


class TestCountConsistency:
    """Total depends only on the filter set."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,limit,order", [
        (1, 1, None),
        (1, 10, SortField("score", SortOrder.DESC)),
        (3, 2, [SortField("name")]),
    ])
    async def test_total_independent_of_paging(self, paginator, memory_store, seed, page, limit, order):
        await seed(memory_store, COLLECTION, make_documents(9, deleted=2))
        filters = [FilterCondition("status", "==", "active")]

        result = await paginator.paginate(
            PaginationOptions(page=page, limit=limit, order_by=order, filters=filters)
        )

        assert result.total == 5

    @pytest.mark.asyncio
    async def test_total_with_soft_deleted(self, paginator, memory_store, seed):
        await seed(memory_store, COLLECTION, make_documents(9, deleted=2))
        filters = [FilterCondition("status", "==", "active")]

        result = await paginator.paginate(
            PaginationOptions(filters=filters, include_soft_deleted=True, limit=1)
        )

        assert result.total == 7
