"""Schema for users active during a year."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.user_document import UserDocument


class ActiveUsersReport(BaseSchemaModel):
    """Users with at least one review rated in the given UTC year."""

    year: int = Field(..., description="Calendar year (UTC)")
    active_user_count: int = Field(..., ge=0, description="Number of users")
    active_users: list[UserDocument] = Field(..., description="Active users")
