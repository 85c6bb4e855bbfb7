"""Unit tests for user and review schemas."""

import unittest
from datetime import UTC, datetime

from bson import ObjectId
from pydantic import ValidationError

from core.schemas import (
    AddReviewRequest,
    MostActiveUser,
    ReviewInput,
    UserCreate,
    UserDocument,
    UserUpdate,
)
from tests.factories import make_review, make_user, user_payload


class TestUserDocument(unittest.TestCase):
    """Tests for the stored user representation."""

    def test_reviews_are_exposed_under_events(self):
        event_id = ObjectId()
        user = make_user(
            3, reviews=[make_review(event_id, 4, datetime(2024, 6, 1, 12))]
        )

        data = UserDocument.model_validate(user).to_response()

        self.assertEqual(data["_id"], 3)
        self.assertEqual(
            data["events"],
            [
                {
                    "eventId": str(event_id),
                    "rating": 4,
                    "ratedAt": "2024-06-01T12:00:00Z",
                }
            ],
        )

    def test_missing_review_list_defaults_to_empty(self):
        user = make_user(1)
        del user["events"]

        self.assertEqual(UserDocument.model_validate(user).reviews, [])

    def test_most_active_user_carries_review_count(self):
        user = make_user(2, reviewCount=7)

        data = MostActiveUser.model_validate(user).to_response()

        self.assertEqual(data["reviewCount"], 7)


class TestReviewInput(unittest.TestCase):
    """Tests for reviews supplied in user payloads."""

    def test_builds_embedded_review(self):
        event_id = str(ObjectId())
        now = datetime(2024, 1, 1)

        review = ReviewInput.model_validate({"eventId": event_id, "rating": 3})

        self.assertEqual(
            review.to_document(now),
            {"eventId": ObjectId(event_id), "rating": 3, "ratedAt": now},
        )

    def test_keeps_supplied_rated_at(self):
        review = ReviewInput.model_validate(
            {
                "eventId": str(ObjectId()),
                "rating": 2.5,
                "ratedAt": "2023-12-31T23:00:00-02:00",
            }
        )

        document = review.to_document(datetime(2024, 6, 1))

        self.assertEqual(document["ratedAt"], datetime(2024, 1, 1, 1, 0))
        self.assertEqual(document["rating"], 2.5)

    def test_rejects_integer_event_references(self):
        with self.assertRaises(ValidationError):
            ReviewInput.model_validate({"eventId": 17, "rating": 3})

    def test_rejects_out_of_range_ratings(self):
        for rating in (-1, 5.5, "great", True):
            with self.subTest(rating=rating):
                with self.assertRaises(ValidationError):
                    ReviewInput.model_validate(
                        {"eventId": str(ObjectId()), "rating": rating}
                    )


class TestUserCreate(unittest.TestCase):
    """Tests for user creation payloads."""

    def test_builds_document_with_allocated_id(self):
        event_id = str(ObjectId())
        now = datetime(2024, 5, 5)
        payload = user_payload(events=[{"eventId": event_id, "rating": 5}])

        user = UserCreate.model_validate(payload)
        document = user.to_document(12, now)

        self.assertEqual(document["_id"], 12)
        self.assertEqual(document["gender"], "F")
        self.assertEqual(document["events"][0]["eventId"], ObjectId(event_id))
        self.assertEqual(user.event_ids, {event_id})

    def test_client_supplied_id_is_ignored(self):
        user = UserCreate.model_validate(user_payload(_id=999))

        self.assertEqual(user.to_document(1, datetime(2024, 1, 1))["_id"], 1)

    def test_validates_gender_and_age(self):
        invalid = [
            {"gender": "X"},
            {"age": -1},
            {"age": 151},
            {"age": 30.5},
            {"name": ""},
        ]
        for overrides in invalid:
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValidationError):
                    UserCreate.model_validate(user_payload(**overrides))


class TestUserUpdate(unittest.TestCase):
    """Tests for partial user updates."""

    def test_only_supplied_fields_are_set(self):
        changes = UserUpdate.model_validate({"occupation": "Chef"})

        self.assertEqual(
            changes.to_set_document(datetime(2024, 1, 1)), {"occupation": "Chef"}
        )

    def test_replacement_reviews_are_converted(self):
        event_id = str(ObjectId())
        now = datetime(2024, 1, 1)

        changes = UserUpdate.model_validate(
            {"events": [{"eventId": event_id, "rating": 1}]}
        )

        self.assertEqual(
            changes.to_set_document(now),
            {
                "events": [
                    {"eventId": ObjectId(event_id), "rating": 1, "ratedAt": now}
                ]
            },
        )
        self.assertEqual(changes.event_ids, {event_id})

    def test_identifier_cannot_be_changed(self):
        with self.assertRaises(ValidationError):
            UserUpdate.model_validate({"_id": 5})

    def test_rejects_invalid_gender(self):
        with self.assertRaises(ValidationError):
            UserUpdate.model_validate({"gender": "male"})

    def test_rejects_dotted_review_paths(self):
        with self.assertRaises(ValidationError) as ctx:
            UserUpdate.model_validate({"events.0.rating": 99})

        self.assertEqual(ctx.exception.errors()[0]["type"], "extra_forbidden")


class TestAddReviewRequest(unittest.TestCase):
    """Tests for the add-review body."""

    def test_rated_at_is_optional(self):
        request = AddReviewRequest.model_validate({"rating": 4})

        self.assertEqual(request.rating, 4)
        self.assertIsNone(request.rated_at)

    def test_parses_rated_at(self):
        request = AddReviewRequest.model_validate(
            {"rating": 0, "ratedAt": "2024-06-01T00:00:00Z"}
        )

        self.assertEqual(request.rated_at, datetime(2024, 6, 1, tzinfo=UTC))

    def test_rating_is_required(self):
        with self.assertRaises(ValidationError):
            AddReviewRequest.model_validate({})


if __name__ == "__main__":
    unittest.main()
