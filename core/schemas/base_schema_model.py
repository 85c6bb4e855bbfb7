"""Base pydantic model for centralized configuration of schema definitions."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base pydantic model for centralized configuration of schema definitions.

    Field names are snake_case in Python and camelCase on the wire, matching
    the documents stored in MongoDB (``reviewsCount``, ``ratedAt``...).
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )

    def to_response(self) -> dict[str, Any]:
        """Dump the model as a JSON-ready dict using wire (alias) names."""
        return self.model_dump(by_alias=True, mode="json")
