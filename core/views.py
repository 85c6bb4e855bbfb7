"""API views for core application."""

from typing import Any

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.constants import DEFAULT_TOP_EVENTS_LIMIT
from core.enums import SortOrder
from core.exceptions import InvalidInputError
from core.schemas import (
    AddReviewRequest,
    EventCreate,
    EventUpdate,
    UserCreate,
    UserUpdate,
)
from core.services import (
    event_service,
    health_service,
    report_service,
    user_service,
)
from core.validators import (
    is_valid_object_id,
    is_year,
    parse_limit,
    parse_object_id,
    parse_page_limit,
    parse_user_id,
    parse_year,
)

logger = structlog.get_logger(__name__)


def _bad_request(e: ValidationError, message: str) -> Response:
    """Build the 400 response for a request body that failed validation."""
    errors = e.errors(include_url=False, include_context=False)
    logger.warning("Invalid request body", message=message, validation_errors=errors)
    return Response(
        {
            "error": "bad_request",
            "message": message,
            "errors": errors,
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def _parse_items(model: type[BaseModel], data: Any) -> list[Any]:
    """Validate a body holding either one object or a list of objects.

    Raises:
        InvalidInputError: If the list is empty
        ValidationError: If any item is invalid
    """
    if not isinstance(data, list):
        return [model.model_validate(data)]
    if not data:
        raise InvalidInputError("Request body must not be empty")
    return TypeAdapter(list[model]).validate_python(data)


def _invalid_item_message(e: ValidationError, label: str) -> str:
    first_loc = e.errors()[0]["loc"]
    if first_loc and isinstance(first_loc[0], int):
        return f"Invalid {label} at index {first_loc[0]}"
    return f"Invalid {label}"


class LivenessCheckView(APIView):
    """Liveness probe endpoint for Kubernetes.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.
    """

    def get(self, _request):
        """Handle GET request for liveness check.

        Args:
            _request: HTTP request object (unused).

        Returns:
            Response object with status OK if service is alive.
        """
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint for Kubernetes.

    Returns 200 if the service is ready to serve traffic.
    Returns degraded status (200 OK) when MongoDB is unavailable,
    allowing the service to stay alive while the driver reconnects.
    """

    def get(self, _request):
        """Handle GET request for readiness check.

        Args:
            _request: HTTP request object (unused).

        Returns:
            Response object with status OK if service is ready or degraded.
        """
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(), status=status.HTTP_200_OK)


class EventListView(APIView):
    """List events page by page, or create one or more events."""

    def get(self, request):
        """Handle GET request for a page of events.

        Query parameters ``page`` (default 1) and ``limit`` (default 20,
        at most 100) select the page.
        """
        page = event_service.list_events(parse_page_limit(request.query_params))
        return Response(page.to_response(), status=status.HTTP_200_OK)

    def post(self, request):
        """Handle POST request to create events.

        Args:
            request: HTTP request whose body is an event or a list of events

        Returns:
            201 Created with insertedCount and insertedIds
            400 Bad Request if any event is invalid
        """
        try:
            events = _parse_items(EventCreate, request.data)
        except ValidationError as e:
            return _bad_request(e, _invalid_item_message(e, "event"))

        result = event_service.create_events(events)
        return Response(result.to_response(), status=status.HTTP_201_CREATED)


class TopRatedEventsView(APIView):
    """Events with the highest mean rating."""

    def get(self, _request, limit=None):
        top_limit = parse_limit(limit, DEFAULT_TOP_EVENTS_LIMIT)
        events = report_service.top_rated_events(top_limit)
        return Response(
            [event.to_response() for event in events], status=status.HTTP_200_OK
        )


class EventsByRatingsCountView(APIView):
    """Reviewed events ordered by review count; ``asc`` or ``desc``."""

    def get(self, _request, order):
        events = report_service.events_by_review_count(SortOrder.from_param(order))
        return Response(
            [event.to_response() for event in events], status=status.HTTP_200_OK
        )


class FiveStarEventsView(APIView):
    """Events ordered by number of 5 ratings."""

    def get(self, _request):
        events = report_service.five_star_events()
        return Response(
            [event.to_response() for event in events], status=status.HTTP_200_OK
        )


class TrendingEventsView(APIView):
    """Events ordered by reviews received in the last 30 days."""

    def get(self, _request):
        events = report_service.trending_events()
        return Response(
            [event.to_response() for event in events], status=status.HTTP_200_OK
        )


class CountyEventsView(APIView):
    """Rating rollup of the events of a county.

    Returns 404 when no event is in the county.
    """

    def get(self, _request, county):
        rollup = report_service.county_rollup(county)
        return Response(rollup.to_response(), status=status.HTTP_200_OK)


class EventStatsView(APIView):
    """Mean rating and review count of one event."""

    def get(self, _request, event_id):
        stats = report_service.event_stats(parse_object_id(event_id))
        return Response(stats.to_response(), status=status.HTTP_200_OK)


class EventDetailView(APIView):
    """Read, update or delete a single event."""

    def get(self, _request, id_or_year):
        """Handle GET request for an event or for the events of a year.

        Args:
            _request: HTTP request object (unused).
            id_or_year: An event ID, or a 4-digit year

        Returns:
            200 OK with the event and its stats, or with the events
            reviewed during the year
            400 Bad Request if the parameter is neither
            404 Not Found if the event does not exist
        """
        if is_year(id_or_year):
            events = report_service.events_reviewed_in_year(parse_year(id_or_year))
            return Response(events.to_response(), status=status.HTTP_200_OK)
        if not is_valid_object_id(id_or_year):
            raise InvalidInputError(f"Invalid event id or year: {id_or_year}")

        event = event_service.get_event(parse_object_id(id_or_year))
        return Response(event.to_response(), status=status.HTTP_200_OK)

    def put(self, request, id_or_year):
        """Handle PUT request for a partial event update.

        Returns:
            200 OK with the updated event
            400 Bad Request if the id or body is invalid
            404 Not Found if the event does not exist
        """
        event_id = parse_object_id(id_or_year)
        try:
            changes = EventUpdate.model_validate(request.data)
        except ValidationError as e:
            return _bad_request(e, "Invalid event update")

        event = event_service.update_event(event_id, changes)
        return Response(event.to_response(), status=status.HTTP_200_OK)

    def delete(self, _request, id_or_year):
        """Handle DELETE request; also removes the event's reviews."""
        event_id = parse_object_id(id_or_year)
        logger.info("Event delete request received", event_id=str(event_id))
        result = event_service.delete_event(event_id)
        return Response(result.to_response(), status=status.HTTP_200_OK)


class UserListView(APIView):
    """List users page by page, or create one or more users."""

    def get(self, request):
        page = user_service.list_users(parse_page_limit(request.query_params))
        return Response(page.to_response(), status=status.HTTP_200_OK)

    def post(self, request):
        """Handle POST request to create users.

        Args:
            request: HTTP request whose body is a user or a list of users

        Returns:
            201 Created with insertedCount and insertedIds
            400 Bad Request if any user is invalid or references a
            missing event
        """
        try:
            users = _parse_items(UserCreate, request.data)
        except ValidationError as e:
            return _bad_request(e, _invalid_item_message(e, "user"))

        result = user_service.create_users(users)
        return Response(result.to_response(), status=status.HTTP_201_CREATED)


class MostActiveUsersView(APIView):
    """Users with the most reviews; 404 when there are no users."""

    def get(self, _request):
        result = user_service.most_active_users()
        return Response(result.to_response(), status=status.HTTP_200_OK)


class ActiveUsersView(APIView):
    """Users with at least one review during a year."""

    def get(self, _request, year):
        report = report_service.active_users_in_year(parse_year(year))
        return Response(report.to_response(), status=status.HTTP_200_OK)


class UserDetailView(APIView):
    """Read, update or delete a single user."""

    def get(self, _request, user_id):
        """Handle GET request for a user and their best rated events."""
        result = user_service.get_user_with_top_events(parse_user_id(user_id))
        return Response(result.to_response(), status=status.HTTP_200_OK)

    def put(self, request, user_id):
        """Handle PUT request for a partial user update.

        Returns:
            200 OK with the updated user
            400 Bad Request if the id or body is invalid
            404 Not Found if the user does not exist
        """
        parsed_id = parse_user_id(user_id)
        try:
            changes = UserUpdate.model_validate(request.data)
        except ValidationError as e:
            return _bad_request(e, "Invalid user update")

        user = user_service.update_user(parsed_id, changes)
        return Response(user.to_response(), status=status.HTTP_200_OK)

    def delete(self, _request, user_id):
        result = user_service.delete_user(parse_user_id(user_id))
        return Response(result.to_response(), status=status.HTTP_200_OK)


class UserReviewView(APIView):
    """Add a review, or update the user's existing review of the event."""

    def post(self, request, user_id, event_id):
        """Handle POST request to rate an event.

        Returns:
            201 Created with userId, eventId and created flag
            400 Bad Request if an id or the rating is invalid
            404 Not Found if the user or event does not exist
        """
        parsed_user_id = parse_user_id(user_id)
        parsed_event_id = parse_object_id(event_id, field="event id")
        try:
            review = AddReviewRequest.model_validate(request.data)
        except ValidationError as e:
            return _bad_request(e, "Invalid rating. Must be a number between 0 and 5")

        result = user_service.add_review(parsed_user_id, parsed_event_id, review)
        return Response(result.to_response(), status=status.HTTP_201_CREATED)
