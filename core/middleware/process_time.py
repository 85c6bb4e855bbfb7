"""Process time middleware for spotting slow queries."""

import time
from collections.abc import Callable

import structlog
from django.http import HttpRequest, HttpResponse

from core.constants import PROCESS_TIME_HEADER, SLOW_REQUEST_THRESHOLD

logger = structlog.get_logger(__name__)


class ProcessTimeMiddleware:
    """Report request duration in X-Process-Time and warn on slow requests."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        start_time = time.perf_counter()
        response = self.get_response(request)
        duration = time.perf_counter() - start_time

        response[PROCESS_TIME_HEADER] = f"{duration:.6f}"
        if duration > SLOW_REQUEST_THRESHOLD:
            logger.warning(
                "Slow request detected",
                method=request.method,
                path=request.path,
                duration_seconds=round(duration, 3),
                threshold_seconds=SLOW_REQUEST_THRESHOLD,
            )
        return response
