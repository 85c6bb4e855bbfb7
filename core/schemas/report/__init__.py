"""Schemas returned by the reporting queries."""

from core.schemas.report.active_users_report import ActiveUsersReport
from core.schemas.report.county_rollup import CountyEvent, CountyRollup
from core.schemas.report.event_detail import EventDetail
from core.schemas.report.event_stats import EventStats
from core.schemas.report.events_in_year import EventsInYear
from core.schemas.report.most_active_users import MostActiveUsers
from core.schemas.report.ranked_events import (
    FiveStarEvent,
    RatedEvent,
    ReviewCountEvent,
    TrendingEvent,
)
from core.schemas.report.user_top_events import UserTopEvents

__all__ = [
    "ActiveUsersReport",
    "CountyEvent",
    "CountyRollup",
    "EventDetail",
    "EventStats",
    "EventsInYear",
    "FiveStarEvent",
    "MostActiveUsers",
    "RatedEvent",
    "ReviewCountEvent",
    "TrendingEvent",
    "UserTopEvents",
]
