"""Exception handling utilities for the event review service."""

from core.exceptions.handlers import custom_exception_handler
from core.exceptions.service_exceptions import (
    CountyNotFoundError,
    EventNotFoundError,
    EventReviewServiceError,
    InvalidInputError,
    NoUsersFoundError,
    ResourceNotFoundError,
    StoreError,
    UserNotFoundError,
)

__all__ = [
    "CountyNotFoundError",
    "EventNotFoundError",
    "EventReviewServiceError",
    "InvalidInputError",
    "NoUsersFoundError",
    "ResourceNotFoundError",
    "StoreError",
    "UserNotFoundError",
    "custom_exception_handler",
]
