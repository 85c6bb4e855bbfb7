"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    ActiveUsersView,
    CountyEventsView,
    EventDetailView,
    EventListView,
    EventsByRatingsCountView,
    EventStatsView,
    FiveStarEventsView,
    LivenessCheckView,
    MostActiveUsersView,
    ReadinessCheckView,
    TopRatedEventsView,
    TrendingEventsView,
    UserDetailView,
    UserListView,
    UserReviewView,
)

urlpatterns = [
    # Health checks
    path("health/live", LivenessCheckView.as_view(), name="liveness-check"),
    path("health/ready", ReadinessCheckView.as_view(), name="readiness-check"),
    # Events; fixed paths must precede events/<id_or_year>
    path("events", EventListView.as_view(), name="event-list"),
    path("events/top", TopRatedEventsView.as_view(), name="events-top"),
    path(
        "events/top/<str:limit>",
        TopRatedEventsView.as_view(),
        name="events-top-limit",
    ),
    path(
        "events/ratings/<str:order>",
        EventsByRatingsCountView.as_view(),
        name="events-ratings",
    ),
    path("events/star", FiveStarEventsView.as_view(), name="events-star"),
    path("events/trending", TrendingEventsView.as_view(), name="events-trending"),
    path(
        "events/county/<str:county>",
        CountyEventsView.as_view(),
        name="events-county",
    ),
    path(
        "events/<str:event_id>/stats",
        EventStatsView.as_view(),
        name="event-stats",
    ),
    path(
        "events/<str:id_or_year>",
        EventDetailView.as_view(),
        name="event-detail",
    ),
    # Users
    path("users", UserListView.as_view(), name="user-list"),
    path("users/top", MostActiveUsersView.as_view(), name="users-top"),
    path("users/active/<str:year>", ActiveUsersView.as_view(), name="users-active"),
    path("users/<str:user_id>", UserDetailView.as_view(), name="user-detail"),
    path(
        "users/<str:user_id>/review/<str:event_id>",
        UserReviewView.as_view(),
        name="user-review",
    ),
]
