"""Review write result schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.fields import ObjectIdStr


class ReviewWriteResult(BaseSchemaModel):
    """Outcome of adding or updating a review."""

    user_id: int = Field(..., description="Reviewing user")
    event_id: ObjectIdStr = Field(..., description="Reviewed event")
    created: bool = Field(
        ..., description="True if appended, False if updated in place"
    )
