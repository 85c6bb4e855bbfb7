"""Production server startup script for the event review service.

Starts the Django application under Gunicorn, as used in containers.
Bind address, worker and thread counts and timeout can be overridden with
GUNICORN_BIND, GUNICORN_WORKERS, GUNICORN_THREADS and GUNICORN_TIMEOUT.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def build_argv() -> list[str]:
    """Build the Gunicorn command line from the environment."""
    return [
        "gunicorn",
        "event_review_service.wsgi:application",
        "--bind",
        os.getenv("GUNICORN_BIND", "0.0.0.0:8000"),
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        os.getenv("GUNICORN_TIMEOUT", "60"),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Start the event review service using Gunicorn."""
    sys.argv = build_argv()
    run()


if __name__ == "__main__":
    main()
