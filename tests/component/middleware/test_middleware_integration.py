"""Component tests for the middleware stack through the HTTP cycle."""

from django.test import Client

from core.constants import PROCESS_TIME_HEADER, REQUEST_ID_HEADER, SECURITY_HEADERS
from tests.base import BaseComponentTest


class TestMiddlewareIntegration(BaseComponentTest):
    def setUp(self):
        super().setUp()
        self.client = Client()

    def test_success_response_carries_all_headers(self):
        response = self.client.get("/api/v1/health/live")

        self.assertIn(REQUEST_ID_HEADER, response)
        self.assertIn(PROCESS_TIME_HEADER, response)
        for header in SECURITY_HEADERS:
            self.assertIn(header, response)

    def test_client_request_id_is_echoed(self):
        response = self.client.get("/api/v1/events", HTTP_X_REQUEST_ID="abc-123")

        self.assertEqual(response[REQUEST_ID_HEADER], "abc-123")

    def test_error_body_carries_request_id(self):
        response = self.client.get(
            "/api/v1/events/county/Nowhere", HTTP_X_REQUEST_ID="abc-456"
        )

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["request_id"], "abc-456")
        self.assertEqual(response[REQUEST_ID_HEADER], "abc-456")
