"""Review schemas.

Reviews are embedded in user documents under the legacy ``events`` key.
"""

from core.schemas.review.add_review_request import AddReviewRequest
from core.schemas.review.review_document import ReviewDocument
from core.schemas.review.review_input import ReviewInput

__all__ = ["AddReviewRequest", "ReviewDocument", "ReviewInput"]
