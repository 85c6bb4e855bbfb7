"""Services for the core app."""

from core.services.event_service import EventService, event_service
from core.services.health_service import HealthService, health_service
from core.services.report_service import ReportService, report_service
from core.services.user_service import UserService, user_service

__all__ = [
    "EventService",
    "HealthService",
    "ReportService",
    "UserService",
    "event_service",
    "health_service",
    "report_service",
    "user_service",
]
