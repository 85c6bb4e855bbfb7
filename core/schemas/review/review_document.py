"""Stored review schema."""

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.fields import LenientUtcDatetime, ObjectIdStr


class ReviewDocument(BaseSchemaModel):
    """One user's rating of one event."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    event_id: ObjectIdStr = Field(..., description="Referenced event ID")
    rating: int | float | None = Field(None, description="Rating from 0 to 5")
    rated_at: LenientUtcDatetime = Field(None, description="When it was rated")
