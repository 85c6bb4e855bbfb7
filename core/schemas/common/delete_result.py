"""Delete result schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class DeleteResult(BaseSchemaModel):
    deleted: bool = Field(..., description="Whether the document was deleted")
