"""Validation helpers for identifiers, pagination and review values.

These run at the HTTP/service boundary so that no query is executed for
malformed input.
"""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from core.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    MAX_RATING,
    MIN_RATING,
)
from core.exceptions.service_exceptions import InvalidInputError

_YEAR_PATTERN = re.compile(r"^\d{4}$")


@dataclass(frozen=True)
class PageParams:
    """Offset/limit pagination derived from page and limit parameters."""

    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def is_valid_object_id(value: Any) -> bool:
    """Return True if value is the canonical 24-hex string of an ObjectId."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return False
    try:
        return str(ObjectId(value)) == value
    except (InvalidId, TypeError):
        return False


def parse_object_id(value: Any, field: str = "id") -> ObjectId:
    """Parse an event identifier.

    Raises:
        InvalidInputError: If value is not a valid ObjectId string.
    """
    if isinstance(value, ObjectId):
        return value
    if not is_valid_object_id(value):
        raise InvalidInputError(f"Invalid {field} format: {value}")
    return ObjectId(value)


def is_valid_user_id(value: Any) -> bool:
    """Return True if value is (or parses as) a positive integer."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, str) and value.strip().isdigit():
        return int(value) > 0
    return False


def parse_user_id(value: Any) -> int:
    """Parse a user identifier.

    Raises:
        InvalidInputError: If value is not a positive integer.
    """
    if not is_valid_user_id(value):
        raise InvalidInputError(f"Invalid user id: {value}")
    return int(value)


def parse_page_limit(params: Mapping[str, Any]) -> PageParams:
    """Parse ``page`` and ``limit`` query parameters.

    Unparsable values fall back to the defaults; ``page`` is at least 1 and
    ``limit`` is clamped to [1, MAX_PAGE_LIMIT].
    """
    page = _int_or_default(params.get("page"), DEFAULT_PAGE)
    limit = _int_or_default(params.get("limit"), DEFAULT_PAGE_LIMIT)
    return PageParams(page=max(1, page), limit=max(1, min(MAX_PAGE_LIMIT, limit)))


def parse_limit(value: Any, default: int) -> int:
    """Parse a positive limit, falling back to default when unusable."""
    limit = _int_or_default(value, default)
    return limit if limit > 0 else default


def is_year(value: Any) -> bool:
    return isinstance(value, str) and bool(_YEAR_PATTERN.match(value))


def parse_year(value: Any) -> int:
    """Parse a 4-digit year.

    Raises:
        InvalidInputError: If value is not exactly four digits.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not is_year(value):
        raise InvalidInputError(f"Invalid year format: {value}")
    return int(value)


def parse_rating(value: Any, field: str = "rating") -> float:
    """Parse a rating as a finite number within [MIN_RATING, MAX_RATING].

    Raises:
        InvalidInputError: If the rating is missing, non-numeric or out of range.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidInputError(
            f"Invalid {field}. Must be a number between {MIN_RATING} and {MAX_RATING}"
        )
    try:
        rating = float(value)
    except (TypeError, ValueError):
        rating = math.nan
    if not math.isfinite(rating) or not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidInputError(
            f"Invalid {field}. Must be a number between {MIN_RATING} and {MAX_RATING}"
        )
    return int(rating) if rating.is_integer() else rating


def parse_timestamp(value: Any, field: str = "timestamp") -> datetime:
    """Parse an ISO-8601 string or datetime into a naive UTC datetime.

    MongoDB stores dates as UTC; pymongo's default codec hands back naive
    datetimes, so naive UTC is the storage representation throughout.

    Raises:
        InvalidInputError: If the value is not a datetime or ISO-8601 string.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidInputError(f"Invalid {field}: {value}") from e
    else:
        raise InvalidInputError(f"Invalid {field}: {value}")
    return to_storage_datetime(parsed)


def to_storage_datetime(value: datetime) -> datetime:
    """Convert a datetime to naive UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value


def utc_now() -> datetime:
    """Current time as a naive UTC datetime."""
    return to_storage_datetime(datetime.now(UTC))


def _int_or_default(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
