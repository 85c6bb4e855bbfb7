"""Django application configuration for core."""

from django.apps import AppConfig
from django.conf import settings

import structlog

from core.logging import setup_logging

logger = structlog.get_logger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the core application.

    The app owns no relational models; its data lives in MongoDB.
    """

    name = "core"
    verbose_name = "Event reviews"

    def ready(self) -> None:
        """Install structured logging unless running under the test settings."""
        if getattr(settings, "TEST_MODE", False):
            return
        setup_logging()
        logger.info(
            "Event review service configured",
            mongodb_name=settings.MONGODB_NAME,
            mongodb_client=settings.MONGODB_CLIENT_CLASS,
        )
