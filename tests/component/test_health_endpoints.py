"""Component tests for health check endpoints."""

from unittest.mock import patch

from django.test import Client
from pymongo.errors import ServerSelectionTimeoutError

from core.db import document_store
from core.exceptions import StoreError
from tests.base import BaseComponentTest


class TestHealthCheckEndpoints(BaseComponentTest):
    """Component tests for health check endpoints through HTTP."""

    def setUp(self):
        super().setUp()
        self.client = Client()

    def test_liveness_endpoint_returns_alive(self):
        response = self.client.get("/api/v1/health/live")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "alive"})

    def test_readiness_endpoint_when_mongodb_healthy(self):
        response = self.client.get("/api/v1/health/ready")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "ready")
        self.assertFalse(data["degraded"])
        self.assertTrue(data["dependencies"]["mongodb"]["healthy"])

    def test_readiness_endpoint_degraded_when_mongodb_down(self):
        error = StoreError(
            "ping", "admin", ServerSelectionTimeoutError("Connection refused")
        )

        with patch.object(document_store, "ping", side_effect=error):
            response = self.client.get("/api/v1/health/ready")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "degraded")
        self.assertTrue(data["ready"])
        self.assertTrue(data["degraded"])
        self.assertEqual(data["dependencies"]["mongodb"]["status"], "unhealthy")
        self.assertIn("Connection refused", data["dependencies"]["mongodb"]["message"])

    def test_store_failure_on_query_returns_500(self):
        error = StoreError("aggregate", "users", ServerSelectionTimeoutError("down"))

        with patch.object(document_store, "aggregate", side_effect=error):
            response = self.client.get("/api/v1/events/top")

        self.assertEqual(response.status_code, 500)
        self.assertNotIn("down", response.json()["message"])
