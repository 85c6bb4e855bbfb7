"""Schema for the most active users ranking."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.most_active_user import MostActiveUser


class MostActiveUsers(BaseSchemaModel):
    message: str = Field(..., description="Summary message")
    total_users: int = Field(..., ge=0, description="Users in the collection")
    top_users: list[MostActiveUser] = Field(
        ..., description="Users with the most reviews"
    )
