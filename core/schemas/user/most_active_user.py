"""Most active user schema."""

from pydantic import Field

from core.schemas.user.user_document import UserDocument


class MostActiveUser(UserDocument):
    """A user ranked by how many reviews they wrote."""

    review_count: int = Field(..., ge=0, description="Number of reviews")
