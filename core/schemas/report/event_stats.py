"""Per-event rating statistics."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class EventStats(BaseSchemaModel):
    """Mean rating and review count of one event.

    ``avg`` is null, never zero, when the event has no reviews.
    """

    avg: float | None = Field(None, description="Mean rating")
    count: int = Field(0, ge=0, description="Number of reviews")
