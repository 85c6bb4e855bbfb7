"""Schema for a user with their best rated events."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.event.event_document import EventDocument
from core.schemas.user.user_document import UserDocument


class UserTopEvents(BaseSchemaModel):
    user: UserDocument = Field(..., description="The user")
    best_rated_events: list[EventDocument] = Field(
        ..., description="Up to three events the user rated highest"
    )
