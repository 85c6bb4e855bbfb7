"""Reporting queries over user reviews.

Reviews are embedded in user documents, so every report flattens the
``users.events`` array, groups the resulting review records by event and
joins the ``events`` collection. Each report runs as a single aggregation
pipeline; only the final reshaping of the (already limited) rows happens
here.
"""

from datetime import datetime, timedelta
from typing import Any

import structlog
from bson import ObjectId

from core.constants import (
    DEFAULT_TOP_EVENTS_LIMIT,
    EVENTS_COLLECTION,
    FIVE_STAR_RATING,
    SCORE_DECIMAL_PLACES,
    TRENDING_WINDOW_DAYS,
    USER_BEST_EVENTS_LIMIT,
    USERS_COLLECTION,
)
from core.db import DocumentStore, document_store
from core.enums import SortOrder
from core.exceptions import (
    CountyNotFoundError,
    InvalidInputError,
    UserNotFoundError,
)
from core.repositories import EventRepository, UserRepository
from core.repositories import event_repository as default_event_repository
from core.repositories import user_repository as default_user_repository
from core.schemas.event import EventDocument
from core.schemas.report import (
    ActiveUsersReport,
    CountyEvent,
    CountyRollup,
    EventStats,
    EventsInYear,
    FiveStarEvent,
    RatedEvent,
    ReviewCountEvent,
    TrendingEvent,
    UserTopEvents,
)
from core.schemas.user import UserDocument
from core.validators import utc_now

logger = structlog.get_logger(__name__)

_UNWIND_REVIEWS = {"$unwind": "$events"}
_JOIN_EVENT = [
    {
        "$lookup": {
            "from": EVENTS_COLLECTION,
            "localField": "_id",
            "foreignField": "_id",
            "as": "event",
        }
    },
    # drops reviews whose event no longer exists
    {"$unwind": "$event"},
]


def _round_score(value: float | None) -> float | None:
    if value is None:
        return None
    return round(value, SCORE_DECIMAL_PLACES)


def _merge_event(row: dict[str, Any], **stats: Any) -> dict[str, Any]:
    return {**row["event"], **stats}


class ReportService:
    """Read-only statistics joining user reviews against events."""

    def __init__(
        self,
        store: DocumentStore = document_store,
        events: EventRepository = default_event_repository,
        users: UserRepository = default_user_repository,
    ) -> None:
        self.store = store
        self.events = events
        self.users = users

    def top_rated_events(
        self, limit: int = DEFAULT_TOP_EVENTS_LIMIT
    ) -> list[RatedEvent]:
        """Events with the highest mean rating.

        Ties are broken by review count (descending) then event id.

        Args:
            limit: Maximum number of events to return

        Returns:
            Events with ``averageScore`` (2 decimals) and ``reviewsCount``
        """
        rows = self.store.aggregate(
            USERS_COLLECTION,
            [
                _UNWIND_REVIEWS,
                {
                    "$group": {
                        "_id": "$events.eventId",
                        "averageScore": {"$avg": "$events.rating"},
                        "reviewsCount": {"$sum": 1},
                    }
                },
                *_JOIN_EVENT,
                {"$sort": {"averageScore": -1, "reviewsCount": -1, "_id": 1}},
                {"$limit": limit},
            ],
        )
        logger.debug("top_rated_events_computed", limit=limit, count=len(rows))
        return [
            RatedEvent.model_validate(
                _merge_event(
                    row,
                    averageScore=_round_score(row["averageScore"]),
                    reviewsCount=row["reviewsCount"],
                )
            )
            for row in rows
        ]

    def events_by_review_count(
        self, order: SortOrder = SortOrder.DESC
    ) -> list[ReviewCountEvent]:
        """Reviewed events ordered by number of reviews, ties by event id."""
        rows = self.store.aggregate(
            USERS_COLLECTION,
            [
                _UNWIND_REVIEWS,
                {"$group": {"_id": "$events.eventId", "reviewsCount": {"$sum": 1}}},
                *_JOIN_EVENT,
                {"$sort": {"reviewsCount": order.direction, "_id": 1}},
            ],
        )
        return [
            ReviewCountEvent.model_validate(
                _merge_event(row, reviewsCount=row["reviewsCount"])
            )
            for row in rows
        ]

    def five_star_events(self) -> list[FiveStarEvent]:
        """Events ordered by how many exact 5 ratings they received."""
        rows = self.store.aggregate(
            USERS_COLLECTION,
            [
                _UNWIND_REVIEWS,
                {"$match": {"events.rating": FIVE_STAR_RATING}},
                {
                    "$group": {
                        "_id": "$events.eventId",
                        "fiveStarsCount": {"$sum": 1},
                    }
                },
                *_JOIN_EVENT,
                {"$sort": {"fiveStarsCount": -1, "_id": 1}},
            ],
        )
        return [
            FiveStarEvent.model_validate(
                _merge_event(row, fiveStarsCount=row["fiveStarsCount"])
            )
            for row in rows
        ]

    def trending_events(self, now: datetime | None = None) -> list[TrendingEvent]:
        """Events ordered by reviews rated during the trending window.

        Args:
            now: Reference time as naive UTC; defaults to the current time,
                captured once for the whole query

        Returns:
            Events with ``recentReviewCount``
        """
        now = now or utc_now()
        since = now - timedelta(days=TRENDING_WINDOW_DAYS)
        rows = self.store.aggregate(
            USERS_COLLECTION,
            [
                _UNWIND_REVIEWS,
                {"$match": {"events.ratedAt": {"$gte": since}}},
                {
                    "$group": {
                        "_id": "$events.eventId",
                        "recentReviewCount": {"$sum": 1},
                    }
                },
                *_JOIN_EVENT,
                {"$sort": {"recentReviewCount": -1, "_id": 1}},
            ],
        )
        logger.debug(
            "trending_events_computed", since=since.isoformat(), count=len(rows)
        )
        return [
            TrendingEvent.model_validate(
                _merge_event(row, recentReviewCount=row["recentReviewCount"])
            )
            for row in rows
        ]

    def county_rollup(self, county: str) -> CountyRollup:
        """Rating summary of every event in a county.

        Args:
            county: County name, matched case-insensitively after trimming

        Returns:
            CountyRollup whose ``countyAverage`` is the mean ``averageScore``
            of the events that have at least one review

        Raises:
            InvalidInputError: If the county name is blank
            CountyNotFoundError: If no event is in the county
        """
        county = county.strip()
        if not county:
            raise InvalidInputError("Missing county name")
        events = self.events.find_by_county(county)
        if not events:
            raise CountyNotFoundError(county)

        stats = self._review_stats([event["_id"] for event in events])
        county_events = []
        for event in events:
            average, count = stats.get(event["_id"], (None, 0))
            county_events.append(
                CountyEvent.model_validate(
                    {
                        **event,
                        "averageScore": _round_score(average),
                        "reviewsCount": count,
                    }
                )
            )

        scores = [
            event.average_score
            for event in county_events
            if event.average_score is not None
        ]
        county_average = _round_score(sum(scores) / len(scores)) if scores else None

        return CountyRollup(
            county=county,
            total_events=len(county_events),
            county_average=county_average,
            events=county_events,
        )

    def active_users_in_year(self, year: int) -> ActiveUsersReport:
        """Users with at least one review rated during the UTC calendar year.

        Reviews without a date, or with a non-date ``ratedAt``, never match.
        """
        users = self.users.find_reviewed_between(
            datetime(year, 1, 1), datetime(year + 1, 1, 1)
        )
        return ActiveUsersReport(
            year=year,
            active_user_count=len(users),
            active_users=[UserDocument.model_validate(user) for user in users],
        )

    def user_top_events(self, user_id: int) -> UserTopEvents:
        """A user together with the (up to) three events they rated highest.

        Ratings are ordered descending; ties go to the most recent
        ``ratedAt`` (undated reviews last), then to the earlier review.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        document = self.users.get_by_id(user_id)
        if document is None:
            raise UserNotFoundError(user_id)
        user = UserDocument.model_validate(document)

        ranked = sorted(
            (review for review in user.reviews if review.rating is not None),
            key=lambda review: (
                review.rating,
                review.rated_at is not None,
                review.rated_at.timestamp() if review.rated_at else 0.0,
            ),
            reverse=True,
        )
        best_ids = []
        for review in ranked:
            if ObjectId.is_valid(review.event_id) and review.event_id not in best_ids:
                best_ids.append(review.event_id)
            if len(best_ids) == USER_BEST_EVENTS_LIMIT:
                break

        found = {
            str(event["_id"]): event
            for event in self.events.find_by_ids(ObjectId(i) for i in best_ids)
        }
        return UserTopEvents(
            user=user,
            best_rated_events=[
                EventDocument.model_validate(found[event_id])
                for event_id in best_ids
                if event_id in found
            ],
        )

    def events_reviewed_in_year(self, year: int) -> EventsInYear:
        """Distinct events with at least one review rated in the UTC year."""
        rows = self.store.aggregate(
            USERS_COLLECTION,
            [
                _UNWIND_REVIEWS,
                {
                    "$match": {
                        "events.ratedAt": {
                            "$gte": datetime(year, 1, 1),
                            "$lt": datetime(year + 1, 1, 1),
                        }
                    }
                },
                {"$group": {"_id": "$events.eventId"}},
                *_JOIN_EVENT,
                {"$sort": {"_id": 1}},
            ],
        )
        return EventsInYear(
            year=year,
            events=[EventDocument.model_validate(row["event"]) for row in rows],
        )

    def event_stats(self, event_id: ObjectId) -> EventStats:
        """Mean rating and number of reviews of one event.

        ``avg`` is None when the event has no reviews.
        """
        average, count = self._review_stats([event_id]).get(event_id, (None, 0))
        return EventStats(avg=average, count=count)

    def _review_stats(
        self, event_ids: list[ObjectId]
    ) -> dict[ObjectId, tuple[float | None, int]]:
        """Map each reviewed event id to its (mean rating, review count)."""
        rows = self.store.aggregate(
            USERS_COLLECTION,
            [
                _UNWIND_REVIEWS,
                {"$match": {"events.eventId": {"$in": event_ids}}},
                {
                    "$group": {
                        "_id": "$events.eventId",
                        "avg": {"$avg": "$events.rating"},
                        "count": {"$sum": 1},
                    }
                },
            ],
        )
        return {row["_id"]: (row["avg"], row["count"]) for row in rows}


# Global report service instance
report_service = ReportService()
