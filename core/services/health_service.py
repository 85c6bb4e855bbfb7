"""Health check service with cached MongoDB connectivity checks."""

import logging
import time

from core.db import document_store
from core.enums import HealthStatus
from core.exceptions import StoreError
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)


class HealthService:
    """Service for performing health checks with caching."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached health check results
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._mongodb_health_cache: DependencyHealth | None = None
        self._mongodb_health_cache_time: float = 0.0

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always returns alive).

        Returns:
            LivenessResponse with status "alive"
        """
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status with a MongoDB health check.

        Returns degraded (ready=True, degraded=True) when MongoDB is down,
        so the service stays deployable while the driver reconnects.

        Returns:
            ReadinessResponse with overall status and dependency health
        """
        mongodb_health = self.check_mongodb_health()

        if mongodb_health.healthy:
            service_status = "ready"
        else:
            service_status = "degraded"

        return ReadinessResponse(
            ready=True,
            status=service_status,
            degraded=not mongodb_health.healthy,
            dependencies={"mongodb": mongodb_health},
        )

    def check_mongodb_health(self) -> DependencyHealth:
        """Ping MongoDB, caching the result for cache_ttl_seconds.

        Returns:
            DependencyHealth with MongoDB status
        """
        current_time = time.time()
        if (
            self._mongodb_health_cache is not None
            and (current_time - self._mongodb_health_cache_time)
            < self.cache_ttl_seconds
        ):
            return self._mongodb_health_cache

        start_time = time.perf_counter()
        try:
            document_store.ping()
            new_health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="MongoDB connection successful",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            if (
                self._mongodb_health_cache is not None
                and not self._mongodb_health_cache.healthy
            ):
                logger.info("MongoDB connection recovered")

        except StoreError as e:
            new_health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"MongoDB connection failed: {e.cause!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            if self._mongodb_health_cache is None or self._mongodb_health_cache.healthy:
                logger.warning("MongoDB connection lost")

        self._mongodb_health_cache = new_health
        self._mongodb_health_cache_time = current_time

        return new_health


# Global health service instance
health_service = HealthService()
