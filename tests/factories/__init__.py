"""Builders for event and user documents and request payloads.

Documents are shaped the way they are stored in MongoDB: naive UTC
datetimes, ObjectId event identifiers and integer user identifiers with
reviews embedded under ``events``.
"""

from datetime import UTC, datetime

from bson import ObjectId
from faker import Faker

fake = Faker()

_IRISH_COUNTIES = ["Dublin", "Cork", "Galway", "Kerry", "Mayo", "Sligo", "York"]


def make_event(**overrides) -> dict:
    """Build an event document with a fresh ObjectId."""
    event = {
        "_id": ObjectId(),
        "changeDate": datetime(2024, 1, 15, 9, 30),
        "establishmentID": str(fake.random_number(digits=6, fix_len=True)),
        "establishmentName": fake.company(),
        "address": fake.street_address(),
        "zipCode": fake.postcode(),
        "county": fake.random_element(_IRISH_COUNTIES),
    }
    event.update(overrides)
    return event


def make_review(event_id, rating=None, rated_at=None) -> dict:
    review = {
        "eventId": event_id,
        "rating": fake.random_int(min=0, max=5) if rating is None else rating,
    }
    if rated_at is not None:
        review["ratedAt"] = rated_at
    return review


def make_user(user_id: int, reviews=(), **overrides) -> dict:
    """Build a user document embedding the given reviews."""
    user = {
        "_id": user_id,
        "name": fake.name(),
        "gender": fake.random_element(["M", "F"]),
        "age": fake.random_int(min=18, max=80),
        "occupation": fake.job(),
        "events": list(reviews),
    }
    user.update(overrides)
    return user


def event_payload(**overrides) -> dict:
    """Build a JSON body for creating an event."""
    payload = {
        "changeDate": datetime(2024, 3, 1, 12, 0, tzinfo=UTC).isoformat(),
        "establishmentID": str(fake.random_number(digits=6, fix_len=True)),
        "establishmentName": fake.company(),
        "address": fake.street_address(),
        "zipCode": fake.postcode(),
        "county": fake.random_element(_IRISH_COUNTIES),
    }
    payload.update(overrides)
    return payload


def user_payload(**overrides) -> dict:
    """Build a JSON body for creating a user."""
    payload = {
        "name": fake.name(),
        "gender": "F",
        "age": 34,
        "occupation": fake.job(),
        "events": [],
    }
    payload.update(overrides)
    return payload
