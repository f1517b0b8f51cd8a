"""Observability infrastructure module.

Provides OpenTelemetry tracing, structured logging, and Prometheus metrics.
"""

from uptime_sla.infrastructure.observability.logging import (
    configure_logging,
    get_logger,
)
from uptime_sla.infrastructure.observability.metrics import (
    get_metrics_content,
    record_invalid_series,
    record_sla_report,
    record_sla_report_run,
)
from uptime_sla.infrastructure.observability.tracing import get_tracer, setup_tracing

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Tracing
    "setup_tracing",
    "get_tracer",
    # Metrics
    "get_metrics_content",
    "record_sla_report",
    "record_invalid_series",
    "record_sla_report_run",
]
