"""Pytest configuration; bootstraps Django with the test settings."""

import os

import django

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "event_review_service.settings_test")
django.setup()
