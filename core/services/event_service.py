"""Event CRUD operations."""

from bson import ObjectId

import structlog

from core.exceptions import EventNotFoundError
from core.repositories import EventRepository, UserRepository
from core.repositories import event_repository as default_event_repository
from core.repositories import user_repository as default_user_repository
from core.schemas.common import DeleteResult, InsertResult, Page
from core.schemas.event import EventCreate, EventDocument, EventUpdate
from core.schemas.report import EventDetail
from core.services.report_service import ReportService, report_service
from core.validators import PageParams

logger = structlog.get_logger(__name__)


class EventService:
    """Service for creating, reading, updating and deleting events."""

    def __init__(
        self,
        events: EventRepository = default_event_repository,
        users: UserRepository = default_user_repository,
        reports: ReportService = report_service,
    ) -> None:
        self.events = events
        self.users = users
        self.reports = reports

    def list_events(self, params: PageParams) -> Page[EventDocument]:
        documents = self.events.list_page(params.skip, params.limit)
        return Page[EventDocument](
            page=params.page,
            limit=params.limit,
            total=self.events.count(),
            items=[EventDocument.model_validate(d) for d in documents],
        )

    def create_events(self, events: list[EventCreate]) -> InsertResult:
        """Insert validated events.

        Args:
            events: One or more events, already validated

        Returns:
            InsertResult with the store assigned identifiers
        """
        inserted_ids = self.events.insert_many([e.to_document() for e in events])
        logger.info("events_created", count=len(inserted_ids))
        return InsertResult(inserted_count=len(inserted_ids), inserted_ids=inserted_ids)

    def get_event(self, event_id: ObjectId) -> EventDetail:
        """Fetch an event with its mean rating and review count.

        Raises:
            EventNotFoundError: If the event does not exist
        """
        document = self.events.get_by_id(event_id)
        if document is None:
            raise EventNotFoundError(str(event_id))
        stats = self.reports.event_stats(event_id)
        return EventDetail.model_validate(
            {**document, "averageScore": stats.avg, "reviewsCount": stats.count}
        )

    def update_event(self, event_id: ObjectId, changes: EventUpdate) -> EventDocument:
        """Apply a partial update and return the updated event.

        Raises:
            EventNotFoundError: If the event does not exist
        """
        document = self.events.update(event_id, changes.to_set_document())
        if document is None:
            raise EventNotFoundError(str(event_id))
        logger.info("event_updated", event_id=str(event_id))
        return EventDocument.model_validate(document)

    def delete_event(self, event_id: ObjectId) -> DeleteResult:
        """Delete an event and pull its reviews from every user.

        The two writes are sequential and not atomic. Reviews are pulled even
        when the event is already gone, so dangling references are cleaned up.

        Raises:
            EventNotFoundError: If the event did not exist
        """
        deleted = self.events.delete(event_id)
        pulled = self.users.pull_event_reviews(event_id)
        logger.info(
            "event_deleted",
            event_id=str(event_id),
            deleted=deleted,
            users_modified=pulled,
        )
        if not deleted:
            raise EventNotFoundError(str(event_id))
        return DeleteResult(deleted=True)


# Global event service instance
event_service = EventService()
