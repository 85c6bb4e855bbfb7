"""Events augmented with a ranking statistic."""

from pydantic import Field

from core.schemas.event.event_document import EventDocument


class RatedEvent(EventDocument):
    """An event ranked by its mean rating."""

    average_score: float = Field(..., description="Mean rating, 2 decimals")
    reviews_count: int = Field(..., ge=1, description="Number of reviews")


class ReviewCountEvent(EventDocument):
    """An event ranked by how many reviews it has."""

    reviews_count: int = Field(..., ge=1, description="Number of reviews")


class FiveStarEvent(EventDocument):
    """An event ranked by how many exact 5 ratings it has."""

    five_stars_count: int = Field(..., ge=1, description="Number of 5 ratings")


class TrendingEvent(EventDocument):
    """An event ranked by reviews inside the trending window."""

    recent_review_count: int = Field(
        ..., ge=1, description="Reviews in the last 30 days"
    )
