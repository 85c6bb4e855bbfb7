"""Common utilities for performance tests."""

from locust import HttpUser, between

API_PREFIX = "/api/v1"


class BasePerformanceUser(HttpUser):
    """Base class for performance test users.

    On start it samples the first page of events and users so tasks can
    address existing documents.
    """

    abstract = True
    wait_time = between(1, 3)

    def on_start(self):
        """Called when user starts."""
        self.event_ids = self._sample_ids("events")
        self.user_ids = self._sample_ids("users")

    def _sample_ids(self, collection):
        with self.client.get(
            f"{API_PREFIX}/{collection}?limit=50",
            name=f"{API_PREFIX}/{collection}",
            catch_response=True,
        ) as response:
            if response.status_code != 200:
                response.failure(f"Could not list {collection}")
                return []
            return [item["_id"] for item in response.json()["items"]]
