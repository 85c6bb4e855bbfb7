"""MongoDB access for the event review service."""

from core.db.client import close_client, get_client, get_database
from core.db.document_store import DocumentStore, document_store

__all__ = [
    "DocumentStore",
    "close_client",
    "document_store",
    "get_client",
    "get_database",
]
