"""Runs the data query and the count query concurrently."""

import logging
import time
from dataclasses import dataclass
from typing import List

from ...core.exceptions import QueryExecutionError, ValidationError
from ...utils.concurrency import gather_or_cancel
from ..database.entities import DocumentStore, StoredDocument, StoreQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    documents: List[StoredDocument]
    total: int
    execution_time_ms: float


class PaginationExecutor:
    """Executes a data/count query pair and times them."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def execute(self, data_query: StoreQuery, count_query: StoreQuery) -> ExecutionResult:
        start = time.perf_counter()
        try:
            documents, total = await gather_or_cancel(
                self.store.query(data_query),
                self.store.count(count_query),
            )
        except ValidationError:
            raise
        except Exception as e:
            logger.error(f"Query execution failed on {data_query.collection}: {e}")
            raise QueryExecutionError(
                f"Query execution failed: {e}", collection=data_query.collection
            ) from e

        elapsed_ms = (time.perf_counter() - start) * 1000
        return ExecutionResult(documents=documents, total=total, execution_time_ms=elapsed_ms)
