from typing import Optional

from prometheus_client import (
    CollectorRegistry,
    Counter,
    ProcessCollector,
    disable_created_metrics,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

# plain counters only, no *_created series
disable_created_metrics()


class ServerMetrics:
    """Counters for one server instance, kept in their own registry."""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        ProcessCollector(registry=self.registry)
        self.ping_requests = Counter(
            "ping_request_count",
            "No of request handled by Ping handler",
            registry=self.registry,
        )
        self.http_requests = Counter(
            "http_requests_total",
            "Total number of HTTP requests by status code",
            ["code"],
            registry=self.registry,
        )
        # expose the 404 series at 0 before the first miss
        self.http_requests.labels(code="404")

    def record_ping(self):
        self.ping_requests.inc()

    def record_status(self, code):
        self.http_requests.labels(code=str(code)).inc()

    def record_not_found(self):
        self.record_status(404)

    def render(self):
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
