"""Paginated list schema."""

from typing import Generic, TypeVar

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel

T = TypeVar("T")


class Page(BaseSchemaModel, Generic[T]):
    """One offset/limit page of a collection."""

    page: int = Field(..., ge=1, description="Current page number")
    limit: int = Field(..., ge=1, description="Number of items per page")
    total: int = Field(..., ge=0, description="Total number of documents")
    items: list[T] = Field(..., description="Documents on this page")
