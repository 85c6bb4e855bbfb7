#!/usr/bin/env python
"""Script to run the Django development server against local MongoDB."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Run the Django development server.

    Uses the custom 'runlocal' command, which pings MongoDB instead of
    checking migrations and starts even when MongoDB is down.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "event_review_service.settings")
    execute_from_command_line([sys.argv[0], "runlocal", *sys.argv[1:]])


if __name__ == "__main__":
    main()
