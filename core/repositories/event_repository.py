"""Repository for queries on the events collection."""

import re
from collections.abc import Iterable
from typing import Any

from bson import ObjectId
from pymongo import ASCENDING

from core.constants import EVENTS_COLLECTION
from core.db import DocumentStore, document_store


class EventRepository:
    """Repository encapsulating events collection queries.

    Event identifiers are always ``ObjectId`` instances here; parsing and
    validation of client input happens before the repository is called.
    """

    def __init__(self, store: DocumentStore = document_store) -> None:
        self.store = store

    def list_page(self, skip: int, limit: int) -> list[dict[str, Any]]:
        """Return one page of events ordered by identifier."""
        return self.store.find(
            EVENTS_COLLECTION, skip=skip, limit=limit, sort=[("_id", ASCENDING)]
        )

    def count(self) -> int:
        return self.store.count_documents(EVENTS_COLLECTION)

    def get_by_id(self, event_id: ObjectId) -> dict[str, Any] | None:
        return self.store.find_one(EVENTS_COLLECTION, {"_id": event_id})

    def find_by_ids(self, event_ids: Iterable[ObjectId]) -> list[dict[str, Any]]:
        return self.store.find(EVENTS_COLLECTION, {"_id": {"$in": list(event_ids)}})

    def find_by_county(self, county: str) -> list[dict[str, Any]]:
        """Find events whose county equals county, ignoring case.

        Args:
            county: County name; surrounding whitespace is ignored

        Returns:
            Matching events ordered by identifier
        """
        pattern = re.compile(f"^{re.escape(county.strip())}$", re.IGNORECASE)
        return self.store.find(
            EVENTS_COLLECTION, {"county": pattern}, sort=[("_id", ASCENDING)]
        )

    def existing_ids(self, event_ids: Iterable[ObjectId]) -> set[ObjectId]:
        """Return the subset of event_ids that exist."""
        documents = self.store.find(
            EVENTS_COLLECTION,
            {"_id": {"$in": list(event_ids)}},
            projection={"_id": 1},
        )
        return {document["_id"] for document in documents}

    def insert_many(self, documents: list[dict[str, Any]]) -> list[ObjectId]:
        return self.store.insert_many(EVENTS_COLLECTION, documents).inserted_ids

    def update(
        self, event_id: ObjectId, changes: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Set the given fields and return the updated event, or None."""
        return self.store.find_one_and_update(
            EVENTS_COLLECTION, {"_id": event_id}, {"$set": changes}
        )

    def delete(self, event_id: ObjectId) -> bool:
        result = self.store.delete_one(EVENTS_COLLECTION, {"_id": event_id})
        return result.deleted_count > 0


# Global event repository instance
event_repository = EventRepository()
