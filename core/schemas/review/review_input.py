"""Schema for reviews supplied with a user."""

from datetime import datetime
from typing import Any

from bson import ObjectId
from pydantic import Field, field_validator

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.fields import Rating
from core.validators import is_valid_object_id, to_storage_datetime


class ReviewInput(BaseSchemaModel):
    """A review in a user create/update payload."""

    event_id: str = Field(..., description="Event ID (ObjectId string)")
    rating: Rating
    rated_at: datetime | None = Field(
        None, description="When it was rated (defaults to now)"
    )

    @field_validator("event_id", mode="before")
    @classmethod
    def validate_event_id(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        if not is_valid_object_id(value):
            raise ValueError(f"Invalid eventId: {value}")
        return value

    def to_document(self, now: datetime) -> dict[str, Any]:
        """Build the embedded review document, stamping ``now`` if unrated."""
        return {
            "eventId": ObjectId(self.event_id),
            "rating": self.rating,
            "ratedAt": (
                to_storage_datetime(self.rated_at) if self.rated_at else now
            ),
        }
