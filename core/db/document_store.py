"""Document store adapter over MongoDB collections.

Every service and repository talks to MongoDB through this adapter so that
driver failures surface uniformly as StoreError and are logged once.
"""

from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

import structlog
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.results import (
    DeleteResult,
    InsertManyResult,
    InsertOneResult,
    UpdateResult,
)

from core.db.client import get_database
from core.exceptions.service_exceptions import StoreError

logger = structlog.get_logger(__name__)

Document = dict[str, Any]
Pipeline = Sequence[Mapping[str, Any]]


class DocumentStore:
    """Collection-oriented adapter supporting CRUD and aggregation pipelines.

    The database is resolved on every call, so the adapter can be created
    at import time and still follow client resets (used by tests).
    """

    def database(self) -> Database:
        return get_database()

    def collection(self, name: str) -> Collection:
        return self.database()[name]

    def find(
        self,
        collection: str,
        filter: Mapping[str, Any] | None = None,  # noqa: A002
        *,
        skip: int = 0,
        limit: int = 0,
        projection: Mapping[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
    ) -> list[Document]:
        """Return all documents matching filter, with optional paging."""
        with self._translate_errors("find", collection):
            cursor = self.collection(collection).find(filter or {}, projection)
            if sort:
                cursor = cursor.sort(sort)
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)
            return list(cursor)

    def find_one(
        self,
        collection: str,
        filter: Mapping[str, Any],  # noqa: A002
        projection: Mapping[str, Any] | None = None,
    ) -> Document | None:
        with self._translate_errors("find_one", collection):
            return self.collection(collection).find_one(filter, projection)

    def count_documents(
        self,
        collection: str,
        filter: Mapping[str, Any] | None = None,  # noqa: A002
    ) -> int:
        with self._translate_errors("count_documents", collection):
            return self.collection(collection).count_documents(filter or {})

    def insert_one(self, collection: str, document: Document) -> InsertOneResult:
        with self._translate_errors("insert_one", collection):
            return self.collection(collection).insert_one(document)

    def insert_many(
        self, collection: str, documents: list[Document]
    ) -> InsertManyResult:
        with self._translate_errors("insert_many", collection):
            return self.collection(collection).insert_many(documents)

    def update_one(
        self,
        collection: str,
        filter: Mapping[str, Any],  # noqa: A002
        update: Mapping[str, Any],
        *,
        upsert: bool = False,
    ) -> UpdateResult:
        with self._translate_errors("update_one", collection):
            return self.collection(collection).update_one(
                filter, update, upsert=upsert
            )

    def update_many(
        self,
        collection: str,
        filter: Mapping[str, Any],  # noqa: A002
        update: Mapping[str, Any],
    ) -> UpdateResult:
        with self._translate_errors("update_many", collection):
            return self.collection(collection).update_many(filter, update)

    def delete_one(
        self,
        collection: str,
        filter: Mapping[str, Any],  # noqa: A002
    ) -> DeleteResult:
        with self._translate_errors("delete_one", collection):
            return self.collection(collection).delete_one(filter)

    def find_one_and_update(
        self,
        collection: str,
        filter: Mapping[str, Any],  # noqa: A002
        update: Mapping[str, Any],
        *,
        upsert: bool = False,
    ) -> Document | None:
        """Atomically update one document and return it after the update."""
        with self._translate_errors("find_one_and_update", collection):
            return self.collection(collection).find_one_and_update(
                filter,
                update,
                upsert=upsert,
                return_document=ReturnDocument.AFTER,
            )

    def aggregate(self, collection: str, pipeline: Pipeline) -> list[Document]:
        """Run an aggregation pipeline and materialize its results."""
        with self._translate_errors("aggregate", collection):
            return list(self.collection(collection).aggregate(list(pipeline)))

    def ping(self) -> None:
        """Round-trip to the server; raises StoreError when unreachable."""
        with self._translate_errors("ping", "admin"):
            self.database().command("ping")

    @contextmanager
    def _translate_errors(self, operation: str, collection: str) -> Iterator[None]:
        try:
            yield
        except PyMongoError as e:
            logger.error(
                "document_store_operation_failed",
                operation=operation,
                collection=collection,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StoreError(operation, collection, e) from e


# Global document store instance
document_store = DocumentStore()
