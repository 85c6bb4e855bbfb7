"""Security headers middleware."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import SECURITY_HEADERS


class SecurityHeadersMiddleware:
    """Add the headers in SECURITY_HEADERS to every response.

    Headers already set by a view are left untouched.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)
        for header, value in SECURITY_HEADERS.items():
            if header not in response:
                response[header] = value
        return response
