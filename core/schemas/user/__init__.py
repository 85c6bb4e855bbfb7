"""User-related Pydantic schemas."""

from core.schemas.user.most_active_user import MostActiveUser
from core.schemas.user.user_create import UserCreate
from core.schemas.user.user_document import UserDocument
from core.schemas.user.user_update import UserUpdate

__all__ = ["MostActiveUser", "UserCreate", "UserDocument", "UserUpdate"]
