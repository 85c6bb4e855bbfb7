"""Schema for events reviewed during a year."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.event.event_document import EventDocument


class EventsInYear(BaseSchemaModel):
    year: int = Field(..., description="Calendar year (UTC)")
    events: list[EventDocument] = Field(
        ..., description="Events with at least one review in the year"
    )
