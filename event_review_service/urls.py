"""URL configuration for the event review service.

All API routes live in the core app and are served under ``/api/v1/``.
"""

from django.urls import include, path

urlpatterns = [
    path("api/v1/", include("core.urls")),
]
