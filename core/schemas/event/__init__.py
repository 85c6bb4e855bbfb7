"""Event schemas."""

from core.schemas.event.event_create import EventCreate
from core.schemas.event.event_document import EventDocument
from core.schemas.event.event_update import EventUpdate

__all__ = ["EventCreate", "EventDocument", "EventUpdate"]
