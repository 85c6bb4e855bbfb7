"""User CRUD and review operations."""

from bson import ObjectId

import structlog

from core.constants import MOST_ACTIVE_USERS_LIMIT
from core.exceptions import (
    EventNotFoundError,
    InvalidInputError,
    NoUsersFoundError,
    UserNotFoundError,
)
from core.repositories import EventRepository, UserRepository
from core.repositories import event_repository as default_event_repository
from core.repositories import user_repository as default_user_repository
from core.schemas.common import DeleteResult, InsertResult, Page, ReviewWriteResult
from core.schemas.report import MostActiveUsers, UserTopEvents
from core.schemas.review import AddReviewRequest
from core.schemas.user import MostActiveUser, UserCreate, UserDocument, UserUpdate
from core.services.report_service import ReportService, report_service
from core.validators import PageParams, to_storage_datetime, utc_now

logger = structlog.get_logger(__name__)


class UserService:
    """Service for users and the reviews embedded in them."""

    def __init__(
        self,
        users: UserRepository = default_user_repository,
        events: EventRepository = default_event_repository,
        reports: ReportService = report_service,
    ) -> None:
        self.users = users
        self.events = events
        self.reports = reports

    def list_users(self, params: PageParams) -> Page[UserDocument]:
        documents = self.users.list_page(params.skip, params.limit)
        return Page[UserDocument](
            page=params.page,
            limit=params.limit,
            total=self.users.count(),
            items=[UserDocument.model_validate(d) for d in documents],
        )

    def create_users(self, users: list[UserCreate]) -> InsertResult:
        """Insert validated users with freshly allocated identifiers.

        Args:
            users: One or more users, already validated

        Returns:
            InsertResult with the allocated user ids

        Raises:
            InvalidInputError: If a review references a missing event
        """
        referenced = set().union(*(user.event_ids for user in users))
        self._require_events_exist(referenced)

        user_ids = self.users.allocate_ids(len(users))
        now = utc_now()
        documents = [
            user.to_document(user_id, now) for user, user_id in zip(users, user_ids)
        ]
        inserted_ids = self.users.insert_many(documents)
        logger.info("users_created", count=len(inserted_ids), user_ids=inserted_ids)
        return InsertResult(inserted_count=len(inserted_ids), inserted_ids=inserted_ids)

    def get_user_with_top_events(self, user_id: int) -> UserTopEvents:
        return self.reports.user_top_events(user_id)

    def update_user(self, user_id: int, changes: UserUpdate) -> UserDocument:
        """Apply a partial update and return the updated user.

        Raises:
            InvalidInputError: If a review references a missing event
            UserNotFoundError: If the user does not exist
        """
        self._require_events_exist(changes.event_ids)
        document = self.users.update(user_id, changes.to_set_document(utc_now()))
        if document is None:
            raise UserNotFoundError(user_id)
        logger.info("user_updated", user_id=user_id)
        return UserDocument.model_validate(document)

    def delete_user(self, user_id: int) -> DeleteResult:
        if not self.users.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info("user_deleted", user_id=user_id)
        return DeleteResult(deleted=True)

    def add_review(
        self, user_id: int, event_id: ObjectId, review: AddReviewRequest
    ) -> ReviewWriteResult:
        """Record a user's rating of an event.

        Updates the user's existing review of the event in place, otherwise
        appends a new one, so a user holds at most one review per event.

        Args:
            user_id: Reviewing user
            event_id: Reviewed event
            review: Rating and optional timestamp (defaults to now)

        Returns:
            ReviewWriteResult; ``created`` is False when an existing review
            was updated

        Raises:
            EventNotFoundError: If the event does not exist
            UserNotFoundError: If the user does not exist
        """
        if self.events.get_by_id(event_id) is None:
            raise EventNotFoundError(str(event_id))
        if self.users.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        rated_at = (
            to_storage_datetime(review.rated_at) if review.rated_at else utc_now()
        )
        if self.users.set_review(user_id, event_id, review.rating, rated_at):
            created = False
        elif self.users.append_review(user_id, event_id, review.rating, rated_at):
            created = True
        # a concurrent request appended the review first
        elif self.users.set_review(user_id, event_id, review.rating, rated_at):
            created = False
        else:
            raise UserNotFoundError(user_id)

        logger.info(
            "review_saved",
            user_id=user_id,
            event_id=str(event_id),
            rating=review.rating,
            created=created,
        )
        return ReviewWriteResult(user_id=user_id, event_id=event_id, created=created)

    def most_active_users(self) -> MostActiveUsers:
        """The users with the most reviews, ties by user id.

        Raises:
            NoUsersFoundError: If there are no users at all
        """
        total = self.users.count()
        if total == 0:
            raise NoUsersFoundError()
        top_users = [
            MostActiveUser.model_validate(document)
            for document in self.users.most_active(MOST_ACTIVE_USERS_LIMIT)
        ]
        return MostActiveUsers(
            message=f"Top {MOST_ACTIVE_USERS_LIMIT} most active users",
            total_users=total,
            top_users=top_users,
        )

    def _require_events_exist(self, event_ids: set[str]) -> None:
        if not event_ids:
            return
        existing = {str(i) for i in self.events.existing_ids(map(ObjectId, event_ids))}
        missing = sorted(event_ids - existing)
        if missing:
            raise InvalidInputError(
                f"Referenced event not found: {', '.join(missing)}",
                errors=[
                    {"loc": ["events", "eventId"], "msg": "Event not found", "input": i}
                    for i in missing
                ],
            )


# Global user service instance
user_service = UserService()
