"""Insert result schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.fields import ObjectIdStr


class InsertResult(BaseSchemaModel):
    inserted_count: int = Field(..., ge=0, description="Documents inserted")
    inserted_ids: list[int | ObjectIdStr] = Field(
        ..., description="Identifiers of the inserted documents"
    )
