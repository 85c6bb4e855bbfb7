"""Schema for creating users."""

from datetime import datetime
from typing import Any

from pydantic import Field

from core.constants import MAX_AGE, MIN_AGE
from core.enums.gender import Gender
from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.review.review_input import ReviewInput


class UserCreate(BaseSchemaModel):
    """Schema for a new user.

    Any client supplied ``_id`` is ignored; ids are allocated by the
    repository.
    """

    name: str = Field(..., min_length=1, description="Display name")
    gender: Gender = Field(..., description="M or F")
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE, description="Age in years")
    occupation: str = Field(..., min_length=1, description="Occupation")
    reviews: list[ReviewInput] = Field(
        default_factory=list, alias="events", description="Initial reviews"
    )

    @property
    def event_ids(self) -> set[str]:
        return {review.event_id for review in self.reviews}

    def to_document(self, user_id: int, now: datetime) -> dict[str, Any]:
        return {
            "_id": user_id,
            "name": self.name,
            "gender": self.gender,
            "age": self.age,
            "occupation": self.occupation,
            "events": [review.to_document(now) for review in self.reviews],
        }
