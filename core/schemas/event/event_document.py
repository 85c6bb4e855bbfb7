"""Stored event document schema."""

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.fields import LenientUtcDatetime, ObjectIdStr


class EventDocument(BaseSchemaModel):
    """An event as stored in the ``events`` collection.

    Fields outside the known set are kept, since events accept arbitrary
    partial updates.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: ObjectIdStr = Field(..., alias="_id", description="Event identifier")
    change_date: LenientUtcDatetime = Field(
        None, description="Last change of the establishment record"
    )
    establishment_id: str | None = Field(
        None, alias="establishmentID", description="External establishment ID"
    )
    establishment_name: str | None = Field(None, description="Establishment name")
    address: str | None = Field(None, description="Street address")
    zip_code: str | None = Field(None, description="Postal code")
    county: str | None = Field(None, description="County name")
