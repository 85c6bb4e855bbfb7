"""Schema for partial event updates."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, model_validator

from core.schemas.base_schema_model import BaseSchemaModel
from core.validators import to_storage_datetime


class EventUpdate(BaseSchemaModel):
    """Partial update of an event.

    Known fields are type-checked; any other field is set as given. The
    identifier can never be changed.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    change_date: datetime | None = Field(None, description="Last change timestamp")
    establishment_id: str | None = Field(
        None, alias="establishmentID", min_length=1, description="Establishment ID"
    )
    establishment_name: str | None = Field(
        None, min_length=1, description="Establishment name"
    )
    address: str | None = Field(None, min_length=1, description="Street address")
    zip_code: str | None = Field(None, min_length=1, description="Postal code")
    county: str | None = Field(None, min_length=1, description="County name")

    @model_validator(mode="before")
    @classmethod
    def reject_identifier(cls, data: Any) -> Any:
        if isinstance(data, dict) and "_id" in data:
            raise ValueError("Event _id cannot be changed")
        if isinstance(data, dict) and any(str(key).startswith("$") for key in data):
            raise ValueError("Field names cannot start with $")
        return data

    @model_validator(mode="after")
    def require_changes(self) -> "EventUpdate":
        if not self.model_fields_set and not self.model_extra:
            raise ValueError("No fields to update")
        return self

    def to_set_document(self) -> dict[str, Any]:
        """Return the ``$set`` document holding only the supplied fields."""
        changes = self.model_dump(by_alias=True, exclude_unset=True)
        changes.update(self.model_extra or {})
        if self.change_date is not None:
            changes["changeDate"] = to_storage_datetime(self.change_date)
        return changes
