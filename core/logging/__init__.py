"""Logging utilities for the event review service."""

from core.logging.config import LoggingSettings, setup_logging
from core.logging.context import clear_request_id, get_request_id, set_request_id

__all__ = [
    "LoggingSettings",
    "clear_request_id",
    "get_request_id",
    "set_request_id",
    "setup_logging",
]
