"""MongoDB client lifecycle.

One client is created lazily per process from Django settings and reused by
every request; pymongo clients are thread-safe and pool their connections.
"""

import threading

from django.conf import settings
from django.utils.module_loading import import_string

import structlog
from pymongo.database import Database

logger = structlog.get_logger(__name__)

_lock = threading.Lock()
_client = None


def get_client():
    """Return the process-wide MongoDB client, creating it on first use."""
    global _client  # noqa: PLW0603
    if _client is None:
        with _lock:
            if _client is None:
                client_class = import_string(settings.MONGODB_CLIENT_CLASS)
                _client = client_class(
                    settings.MONGODB_URI, **settings.MONGODB_CLIENT_OPTIONS
                )
                logger.info(
                    "mongodb_client_created",
                    client_class=settings.MONGODB_CLIENT_CLASS,
                    database=settings.MONGODB_NAME,
                )
    return _client


def get_database() -> Database:
    """Return the configured service database."""
    return get_client()[settings.MONGODB_NAME]


def close_client() -> None:
    """Close and forget the process-wide client.

    The next call to get_client() creates a fresh one.
    """
    global _client  # noqa: PLW0603
    with _lock:
        if _client is not None:
            _client.close()
            _client = None
            logger.info("mongodb_client_closed")
