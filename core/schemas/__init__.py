"""Schemas for the core app."""

from core.schemas.common import DeleteResult, InsertResult, Page, ReviewWriteResult
from core.schemas.event import EventCreate, EventDocument, EventUpdate
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.report import (
    ActiveUsersReport,
    CountyEvent,
    CountyRollup,
    EventDetail,
    EventStats,
    EventsInYear,
    FiveStarEvent,
    MostActiveUsers,
    RatedEvent,
    ReviewCountEvent,
    TrendingEvent,
    UserTopEvents,
)
from core.schemas.review import AddReviewRequest, ReviewDocument, ReviewInput
from core.schemas.user import MostActiveUser, UserCreate, UserDocument, UserUpdate

__all__ = [
    "ActiveUsersReport",
    "AddReviewRequest",
    "CountyEvent",
    "CountyRollup",
    "DeleteResult",
    "DependencyHealth",
    "EventCreate",
    "EventDetail",
    "EventDocument",
    "EventStats",
    "EventUpdate",
    "EventsInYear",
    "FiveStarEvent",
    "InsertResult",
    "LivenessResponse",
    "MostActiveUser",
    "MostActiveUsers",
    "Page",
    "RatedEvent",
    "ReadinessResponse",
    "ReviewCountEvent",
    "ReviewDocument",
    "ReviewInput",
    "ReviewWriteResult",
    "TrendingEvent",
    "UserCreate",
    "UserDocument",
    "UserTopEvents",
    "UserUpdate",
]
