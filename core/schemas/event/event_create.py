"""Schema for creating events."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.validators import to_storage_datetime


class EventCreate(BaseSchemaModel):
    """Schema for a new event; every field is required and non-empty."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    change_date: datetime = Field(..., description="Last change timestamp")
    establishment_id: str = Field(
        ..., alias="establishmentID", min_length=1, description="Establishment ID"
    )
    establishment_name: str = Field(
        ..., min_length=1, description="Establishment name"
    )
    address: str = Field(..., min_length=1, description="Street address")
    zip_code: str = Field(..., min_length=1, description="Postal code")
    county: str = Field(..., min_length=1, description="County name")

    def to_document(self) -> dict[str, Any]:
        document = self.model_dump(by_alias=True)
        document["changeDate"] = to_storage_datetime(self.change_date)
        return document
