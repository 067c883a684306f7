"""Prometheus metrics for the ExternalDNS operator."""

import logging
from typing import Optional
from prometheus_client import Counter, Gauge, Histogram, Info, generate_latest
from prometheus_client.core import CollectorRegistry

logger = logging.getLogger(__name__)


class OperatorMetrics:
    """
    Prometheus metrics collector for the ExternalDNS operator.

    Tracks admission decisions, validation latency and managed zones.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        """Initialize metrics with optional custom registry."""
        self.registry = registry or CollectorRegistry()

        self.operator_info = Info(
            'externaldns_operator',
            'ExternalDNS operator information',
            registry=self.registry
        )

        # Admission metrics
        self.admission_requests = Counter(
            'externaldns_admission_requests_total',
            'Total number of admission requests',
            ['operation', 'allowed'],
            registry=self.registry
        )

        self.admission_rejection_reasons = Counter(
            'externaldns_admission_rejection_reasons_total',
            'Total number of rejection reasons returned',
            ['operation'],
            registry=self.registry
        )

        self.conversion_errors = Counter(
            'externaldns_conversion_errors_total',
            'Total number of specs that could not be converted',
            ['api_version'],
            registry=self.registry
        )

        self.validation_duration = Histogram(
            'externaldns_validation_duration_seconds',
            'Admission validation duration in seconds',
            ['operation'],
            registry=self.registry
        )

        # Managed state
        self.managed_zones = Gauge(
            'externaldns_managed_zones',
            'Number of zones managed by an ExternalDNS instance',
            ['name'],
            registry=self.registry
        )

    def set_info(self, version: str, platform_aware: bool) -> None:
        """Publish static operator information."""
        self.operator_info.info({
            'version': version,
            'platform_aware': str(platform_aware).lower(),
        })

    def record_admission(
        self,
        operation: str,
        allowed: bool,
        duration: float,
        reasons: int = 0
    ) -> None:
        """Record an admission decision."""
        self.admission_requests.labels(
            operation=operation,
            allowed=str(allowed).lower()
        ).inc()

        self.validation_duration.labels(operation=operation).observe(duration)

        if reasons:
            self.admission_rejection_reasons.labels(operation=operation).inc(reasons)

    def record_conversion_error(self, api_version: str) -> None:
        """Record a spec that failed conversion."""
        self.conversion_errors.labels(api_version=api_version).inc()

    def update_managed_zones(self, name: str, count: int) -> None:
        """Update the number of zones of an instance."""
        self.managed_zones.labels(name=name).set(count)

    def remove_instance(self, name: str) -> None:
        """Drop the series of a deleted instance."""
        try:
            self.managed_zones.remove(name)
        except KeyError:
            logger.debug(f"No managed zones series for {name}")

    def export_metrics(self) -> bytes:
        """Export metrics in Prometheus format."""
        return generate_latest(self.registry)


# Global metrics instance
_metrics: Optional[OperatorMetrics] = None


def get_metrics() -> OperatorMetrics:
    """Get or create global metrics instance."""
    global _metrics
    if _metrics is None:
        _metrics = OperatorMetrics()
    return _metrics
