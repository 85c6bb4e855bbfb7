"""Annotated field types shared by document and request schemas."""

from datetime import UTC, datetime
from typing import Annotated, Any

from bson import ObjectId
from pydantic import AfterValidator, BeforeValidator, PlainValidator

from core.exceptions.service_exceptions import InvalidInputError
from core.validators import parse_rating, parse_timestamp


def _stringify_object_id(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


def _assume_utc(value: datetime | None) -> datetime | None:
    # MongoDB hands back naive UTC datetimes
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _parse_or_none(value: Any) -> datetime | None:
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except InvalidInputError:
        return None


def _validate_rating(value: Any) -> int | float:
    try:
        return parse_rating(value)
    except InvalidInputError as e:
        raise ValueError(str(e)) from e


ObjectIdStr = Annotated[str, BeforeValidator(_stringify_object_id)]
"""An ObjectId rendered as its 24-hex string."""

LenientUtcDatetime = Annotated[
    datetime | None,
    BeforeValidator(_parse_or_none),
    AfterValidator(_assume_utc),
]
"""A stored timestamp; legacy unparsable values become None instead of failing."""

Rating = Annotated[int | float, PlainValidator(_validate_rating)]
"""A rating within [0, 5]; integral values are kept as int."""
