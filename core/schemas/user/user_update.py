"""Schema for partial user updates."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, model_validator

from core.constants import MAX_AGE, MIN_AGE
from core.enums.gender import Gender
from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.review.review_input import ReviewInput


class UserUpdate(BaseSchemaModel):
    """Partial update of a user.

    ``gender``, ``age`` and ``events`` follow the same rules as on create.
    Supplying ``events`` replaces the whole review list. Any other key,
    including dotted paths such as ``events.0.rating``, is rejected.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1, description="Display name")
    gender: Gender | None = Field(None, description="M or F")
    age: int | None = Field(None, ge=MIN_AGE, le=MAX_AGE, description="Age")
    occupation: str | None = Field(None, min_length=1, description="Occupation")
    reviews: list[ReviewInput] | None = Field(
        None, alias="events", description="Replacement review list"
    )

    @model_validator(mode="before")
    @classmethod
    def reject_identifier(cls, data: Any) -> Any:
        if isinstance(data, dict) and "_id" in data:
            raise ValueError("User _id cannot be changed")
        return data

    @model_validator(mode="after")
    def require_changes(self) -> "UserUpdate":
        if not self.model_fields_set:
            raise ValueError("No fields to update")
        return self

    @property
    def event_ids(self) -> set[str]:
        return {review.event_id for review in self.reviews or []}

    def to_set_document(self, now: datetime) -> dict[str, Any]:
        """Return the ``$set`` document holding only the supplied fields."""
        changes = self.model_dump(by_alias=True, exclude_unset=True)
        if "events" in changes:
            changes["events"] = [
                review.to_document(now) for review in self.reviews or []
            ]
        return changes
