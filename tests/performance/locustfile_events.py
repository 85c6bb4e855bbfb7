"""Locust load test for the event and report endpoints.

Run against a service with data loaded:

    locust -f tests/performance/locustfile_events.py --host=http://localhost:8000
"""

import random

from locust import task

from common import API_PREFIX, BasePerformanceUser


class EventReviewUser(BasePerformanceUser):
    """Simulates a client browsing events and their reports."""

    @task(5)
    def list_events(self):
        page = random.randint(1, 5)
        self.client.get(f"{API_PREFIX}/events?page={page}", name=f"{API_PREFIX}/events")

    @task(3)
    def event_detail(self):
        if self.event_ids:
            event_id = random.choice(self.event_ids)
            self.client.get(
                f"{API_PREFIX}/events/{event_id}", name=f"{API_PREFIX}/events/[id]"
            )

    @task(3)
    def top_rated_events(self):
        self.client.get(f"{API_PREFIX}/events/top")

    @task(2)
    def events_by_ratings(self):
        order = random.choice(["asc", "desc"])
        self.client.get(
            f"{API_PREFIX}/events/ratings/{order}",
            name=f"{API_PREFIX}/events/ratings/[order]",
        )

    @task(2)
    def trending_events(self):
        self.client.get(f"{API_PREFIX}/events/trending")

    @task(1)
    def five_star_events(self):
        self.client.get(f"{API_PREFIX}/events/star")

    @task(1)
    def most_active_users(self):
        self.client.get(f"{API_PREFIX}/users/top")

    @task(1)
    def user_detail(self):
        if self.user_ids:
            user_id = random.choice(self.user_ids)
            self.client.get(
                f"{API_PREFIX}/users/{user_id}", name=f"{API_PREFIX}/users/[id]"
            )

    @task(1)
    def rate_event(self):
        if self.user_ids and self.event_ids:
            user_id = random.choice(self.user_ids)
            event_id = random.choice(self.event_ids)
            self.client.post(
                f"{API_PREFIX}/users/{user_id}/review/{event_id}",
                json={"rating": random.randint(0, 5)},
                name=f"{API_PREFIX}/users/[id]/review/[event_id]",
            )
