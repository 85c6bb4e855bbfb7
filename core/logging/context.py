"""Thread-local request ID used to correlate log lines of one request."""

import threading

_request_context = threading.local()


def set_request_id(request_id: str) -> None:
    _request_context.request_id = request_id


def get_request_id() -> str | None:
    """Return the current request's ID, or None outside a request."""
    return getattr(_request_context, "request_id", None)


def clear_request_id() -> None:
    """Forget the request ID once the request has been answered."""
    _request_context.__dict__.pop("request_id", None)
