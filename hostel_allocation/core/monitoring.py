"""
Monitoring and Metrics

Request counters and the store connectivity gauge exposed on
``/metrics`` in Prometheus text format.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from prometheus_client import CollectorRegistry, Counter, Gauge
from prometheus_client.exposition import CONTENT_TYPE_LATEST, generate_latest

from hostel_allocation.config.logging import get_logger

logger = get_logger(__name__)

JOB_NAME = "hostel-allocation"


class HealthStatus(str, Enum):
    """Health check status enumeration"""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass
class HealthCheck:
    """Health check result"""
    name: str
    status: HealthStatus
    message: str
    timestamp: datetime
    details: Optional[Dict[str, Any]] = None

    @property
    def is_healthy(self) -> bool:
        return self.status == HealthStatus.HEALTHY


class PerformanceTracker:
    """
    Track request metrics.

    Each tracker owns its own ``CollectorRegistry`` so that several
    application instances (e.g. in tests) never collide on metric names.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.registry = CollectorRegistry()
        self._init_prometheus_metrics()

    def _init_prometheus_metrics(self) -> None:
        """Initialize Prometheus metrics"""
        self.request_counter = Counter(
            'http_requests_total',
            'Total HTTP requests',
            ['job'],
            registry=self.registry
        )
        self.error_counter = Counter(
            'http_errors_total',
            'Total HTTP errors',
            ['job'],
            registry=self.registry
        )
        self.db_connection_status = Gauge(
            'db_connection_status',
            'Database connection status (1=healthy, 0=unhealthy)',
            registry=self.registry
        )
        # series exist from the first scrape, starting at 0
        self.requests = self.request_counter.labels(job=JOB_NAME)
        self.errors = self.error_counter.labels(job=JOB_NAME)

    def track_request(self, method: str, status_code: int) -> None:
        """Count one served request; 4xx and 5xx also count as errors."""
        if not self.enabled:
            return
        self.requests.inc()
        if status_code >= 400:
            self.errors.inc()
            logger.debug(f"Counted {method} error response {status_code}")

    def record_health(self, check: HealthCheck) -> None:
        self.db_connection_status.set(1 if check.is_healthy else 0)

    def total_requests(self) -> float:
        return self._sum_samples(self.request_counter)

    def total_errors(self) -> float:
        return self._sum_samples(self.error_counter)

    @staticmethod
    def _sum_samples(metric: Counter) -> float:
        total = 0.0
        for family in metric.collect():
            for sample in family.samples:
                if sample.name.endswith("_total"):
                    total += sample.value
        return total

    def render(self) -> bytes:
        """Get Prometheus formatted metrics"""
        return generate_latest(self.registry)


def database_health(reachable: bool) -> HealthCheck:
    """Build the health check result for the backing store."""
    if reachable:
        return HealthCheck(
            name="database",
            status=HealthStatus.HEALTHY,
            message="Database connection successful",
            timestamp=datetime.now(timezone.utc),
        )
    logger.warning("Database health check failed")
    return HealthCheck(
        name="database",
        status=HealthStatus.UNHEALTHY,
        message="Database connection failed",
        timestamp=datetime.now(timezone.utc),
    )
