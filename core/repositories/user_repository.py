"""Repository for queries on the users collection."""

from datetime import datetime
from typing import Any

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from core.constants import COUNTERS_COLLECTION, USER_ID_COUNTER, USERS_COLLECTION
from core.db import DocumentStore, document_store


class UserRepository:
    """Repository encapsulating users collection queries.

    Users embed their reviews under the ``events`` key as
    ``{eventId, rating, ratedAt}`` documents.
    """

    def __init__(self, store: DocumentStore = document_store) -> None:
        self.store = store

    def list_page(self, skip: int, limit: int) -> list[dict[str, Any]]:
        """Return one page of users ordered by identifier."""
        return self.store.find(
            USERS_COLLECTION, skip=skip, limit=limit, sort=[("_id", ASCENDING)]
        )

    def count(self) -> int:
        return self.store.count_documents(USERS_COLLECTION)

    def get_by_id(self, user_id: int) -> dict[str, Any] | None:
        return self.store.find_one(USERS_COLLECTION, {"_id": user_id})

    def allocate_ids(self, count: int) -> list[int]:
        """Atomically reserve count consecutive user identifiers.

        The counter is first raised to the highest existing identifier, so
        users inserted before the counter existed are never reused.

        Args:
            count: Number of identifiers to reserve

        Returns:
            The reserved identifiers in ascending order
        """
        highest = self.store.find(
            USERS_COLLECTION,
            projection={"_id": 1},
            sort=[("_id", DESCENDING)],
            limit=1,
        )
        current_max = highest[0]["_id"] if highest else 0
        self.store.update_one(
            COUNTERS_COLLECTION,
            {"_id": USER_ID_COUNTER},
            {"$max": {"seq": current_max}},
            upsert=True,
        )
        counter = self.store.find_one_and_update(
            COUNTERS_COLLECTION,
            {"_id": USER_ID_COUNTER},
            {"$inc": {"seq": count}},
            upsert=True,
        )
        last = counter["seq"]
        return list(range(last - count + 1, last + 1))

    def insert_many(self, documents: list[dict[str, Any]]) -> list[int]:
        return self.store.insert_many(USERS_COLLECTION, documents).inserted_ids

    def update(self, user_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
        """Set the given fields and return the updated user, or None."""
        return self.store.find_one_and_update(
            USERS_COLLECTION, {"_id": user_id}, {"$set": changes}
        )

    def delete(self, user_id: int) -> bool:
        result = self.store.delete_one(USERS_COLLECTION, {"_id": user_id})
        return result.deleted_count > 0

    def set_review(
        self, user_id: int, event_id: ObjectId, rating: float, rated_at: datetime
    ) -> bool:
        """Update the user's existing review of event_id in place.

        Returns:
            True if the user had a review of the event
        """
        result = self.store.update_one(
            USERS_COLLECTION,
            {"_id": user_id, "events.eventId": event_id},
            {"$set": {"events.$.rating": rating, "events.$.ratedAt": rated_at}},
        )
        return result.matched_count > 0

    def append_review(
        self, user_id: int, event_id: ObjectId, rating: float, rated_at: datetime
    ) -> bool:
        """Append a review of event_id unless the user already has one.

        Returns:
            True if the review was appended
        """
        result = self.store.update_one(
            USERS_COLLECTION,
            {"_id": user_id, "events.eventId": {"$ne": event_id}},
            {
                "$push": {
                    "events": {
                        "eventId": event_id,
                        "rating": rating,
                        "ratedAt": rated_at,
                    }
                }
            },
        )
        return result.matched_count > 0

    def pull_event_reviews(self, event_id: ObjectId) -> int:
        """Remove every review of event_id from every user.

        Returns:
            Number of users modified
        """
        result = self.store.update_many(
            USERS_COLLECTION,
            {"events.eventId": event_id},
            {"$pull": {"events": {"eventId": event_id}}},
        )
        return result.modified_count

    def find_reviewed_between(
        self, start: datetime, end: datetime
    ) -> list[dict[str, Any]]:
        """Users with at least one review rated in [start, end)."""
        return self.store.find(
            USERS_COLLECTION,
            {"events": {"$elemMatch": {"ratedAt": {"$gte": start, "$lt": end}}}},
            sort=[("_id", ASCENDING)],
        )

    def most_active(self, limit: int) -> list[dict[str, Any]]:
        """Users ordered by number of reviews, ties by identifier."""
        return self.store.aggregate(
            USERS_COLLECTION,
            [
                {
                    "$addFields": {
                        "reviewCount": {"$size": {"$ifNull": ["$events", []]}}
                    }
                },
                {"$sort": {"reviewCount": DESCENDING, "_id": ASCENDING}},
                {"$limit": limit},
            ],
        )


# Global user repository instance
user_repository = UserRepository()
