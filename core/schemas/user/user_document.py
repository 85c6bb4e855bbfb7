"""Stored user document schema."""

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.review.review_document import ReviewDocument


class UserDocument(BaseSchemaModel):
    """A user as stored in the ``users`` collection.

    The user's reviews live under the legacy ``events`` key.
    """

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., alias="_id", description="Sequential user ID")
    name: str | None = Field(None, description="Display name")
    gender: str | None = Field(None, description="M or F")
    age: int | None = Field(None, description="Age in years")
    occupation: str | None = Field(None, description="Occupation")
    reviews: list[ReviewDocument] = Field(
        default_factory=list, alias="events", description="Reviews by this user"
    )
