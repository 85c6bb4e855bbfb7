"""Collection repositories for the core app."""

from core.repositories.event_repository import EventRepository, event_repository
from core.repositories.user_repository import UserRepository, user_repository

__all__ = [
    "EventRepository",
    "UserRepository",
    "event_repository",
    "user_repository",
]
