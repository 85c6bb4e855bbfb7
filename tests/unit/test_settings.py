"""Unit tests for Django settings configuration."""

import unittest

from django.conf import settings
from django.test import SimpleTestCase

from event_review_service import settings as main_settings


class TestMainSettings(unittest.TestCase):
    """Tests for the production settings module."""

    def test_uses_pymongo_client(self):
        self.assertEqual(main_settings.MONGODB_CLIENT_CLASS, "pymongo.MongoClient")
        self.assertIn("serverSelectionTimeoutMS", main_settings.MONGODB_CLIENT_OPTIONS)

    def test_has_no_relational_database(self):
        self.assertEqual(main_settings.DATABASES, {})

    def test_test_mode_is_off(self):
        self.assertFalse(main_settings.TEST_MODE)


class TestTestSettingsConfiguration(SimpleTestCase):
    """Tests for test-specific settings overriding the main settings."""

    def test_test_mode_flag_is_set(self):
        self.assertTrue(settings.TEST_MODE)

    def test_debug_is_disabled_in_tests(self):
        self.assertFalse(settings.DEBUG)

    def test_mongodb_is_mocked(self):
        self.assertEqual(settings.MONGODB_CLIENT_CLASS, "mongomock.MongoClient")
        self.assertEqual(settings.MONGODB_NAME, "event_reviews_test")


class TestRestFrameworkSettings(SimpleTestCase):
    def test_custom_exception_handler(self):
        self.assertEqual(
            settings.REST_FRAMEWORK["EXCEPTION_HANDLER"],
            "core.exceptions.custom_exception_handler",
        )

    def test_json_only(self):
        self.assertEqual(
            settings.REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"],
            ["rest_framework.renderers.JSONRenderer"],
        )

    def test_middleware_order(self):
        self.assertEqual(
            settings.MIDDLEWARE[:2],
            [
                "core.middleware.RequestIDMiddleware",
                "core.middleware.ProcessTimeMiddleware",
            ],
        )
        self.assertIn("core.middleware.SecurityHeadersMiddleware", settings.MIDDLEWARE)
