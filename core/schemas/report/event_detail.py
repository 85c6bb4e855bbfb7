"""Event detail schema."""

from pydantic import Field

from core.schemas.event.event_document import EventDocument


class EventDetail(EventDocument):
    """A single event with its review statistics."""

    average_score: float | None = Field(
        None, description="Mean rating; null without reviews"
    )
    reviews_count: int = Field(0, ge=0, description="Number of reviews")
