"""Custom exceptions raised by the event review service layers."""

from typing import Any


class EventReviewServiceError(Exception):
    """Base exception for event review service errors."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        """Initialize service error.

        Args:
            message: Error message
            status_code: HTTP status code the error maps to
        """
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class InvalidInputError(EventReviewServiceError):
    """Malformed identifier, out-of-range value or missing field (400)."""

    status_code = 400

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        """Initialize invalid input error.

        Args:
            message: Error message
            errors: Optional per-field error details
        """
        self.errors = errors or []
        super().__init__(message)


class ResourceNotFoundError(EventReviewServiceError):
    """Referenced entity is absent (404)."""

    status_code = 404


class EventNotFoundError(ResourceNotFoundError):
    """Event not found in the events collection."""

    def __init__(self, event_id: str):
        """Initialize event not found error.

        Args:
            event_id: ID of the event that was not found
        """
        self.event_id = event_id
        super().__init__(f"Event with ID {event_id} not found")


class UserNotFoundError(ResourceNotFoundError):
    """User not found in the users collection."""

    def __init__(self, user_id: int):
        """Initialize user not found error.

        Args:
            user_id: ID of the user that was not found
        """
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


class CountyNotFoundError(ResourceNotFoundError):
    """No events exist for the requested county."""

    def __init__(self, county: str):
        """Initialize county not found error.

        Args:
            county: County name that matched no events
        """
        self.county = county
        super().__init__(f"No events found in county '{county}'")


class NoUsersFoundError(ResourceNotFoundError):
    """The users collection is empty."""

    def __init__(self):
        """Initialize no users found error."""
        super().__init__("No users found")


class StoreError(EventReviewServiceError):
    """The document store failed to execute an operation (500)."""

    status_code = 500

    def __init__(self, operation: str, collection: str, cause: Exception):
        """Initialize store error.

        Args:
            operation: Name of the store operation that failed
            collection: Collection the operation targeted
            cause: The underlying driver exception
        """
        self.operation = operation
        self.collection = collection
        self.cause = cause
        super().__init__(f"Document store {operation} on '{collection}' failed")
