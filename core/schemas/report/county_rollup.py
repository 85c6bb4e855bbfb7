"""County rollup schemas."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.event.event_document import EventDocument


class CountyEvent(EventDocument):
    """An event of a county with its review statistics."""

    average_score: float | None = Field(
        None, description="Mean rating, 2 decimals; null without reviews"
    )
    reviews_count: int = Field(0, ge=0, description="Number of reviews")


class CountyRollup(BaseSchemaModel):
    """Per-county summary of events and their ratings."""

    county: str = Field(..., description="County as requested")
    total_events: int = Field(..., ge=0, description="Events in the county")
    county_average: float | None = Field(
        None, description="Mean of averageScore over rated events"
    )
    events: list[CountyEvent] = Field(..., description="Events of the county")
