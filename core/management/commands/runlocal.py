"""Development server command that checks MongoDB instead of migrations.

The service keeps its data in MongoDB and owns no relational schema, so
Django's migration check is replaced by a MongoDB ping. An unreachable
server only produces a warning: the service starts in degraded mode.
"""

from django.core.management.commands.runserver import Command as RunServer

from core.db import document_store
from core.exceptions import StoreError


class Command(RunServer):
    """runserver that pings MongoDB in place of checking migrations."""

    help = "Start development server and report MongoDB connectivity"

    def check_migrations(self, *_args, **_kwargs):
        """Ping MongoDB; the service owns no migrations."""
        try:
            document_store.ping()
        except StoreError as e:
            self.stdout.write(
                self.style.WARNING(
                    f"MongoDB is unreachable ({e.cause}); starting in degraded mode"
                )
            )
        else:
            self.stdout.write(self.style.SUCCESS("MongoDB connection successful"))
