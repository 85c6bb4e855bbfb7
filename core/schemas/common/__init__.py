"""Schemas shared by the event and user endpoints."""

from core.schemas.common.delete_result import DeleteResult
from core.schemas.common.insert_result import InsertResult
from core.schemas.common.page import Page
from core.schemas.common.review_write_result import ReviewWriteResult

__all__ = ["DeleteResult", "InsertResult", "Page", "ReviewWriteResult"]
