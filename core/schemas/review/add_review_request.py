"""Schema for adding or updating a single review."""

from datetime import datetime

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.fields import Rating


class AddReviewRequest(BaseSchemaModel):
    """Body of ``POST /users/<id>/review/<event_id>``."""

    rating: Rating
    rated_at: datetime | None = Field(
        None, description="When it was rated (defaults to now)"
    )
