"""Prometheus metrics instrumentation.

Defines and exports Prometheus metrics for SLA computation.
Avoids high cardinality by omitting device_id from labels.
"""

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# SLA Calculation Metrics
sla_calculations_total = Counter(
    name="uptime_sla_calculations_total",
    documentation="Total number of availability calculations",
    labelnames=["policy"],
)

sla_report_duration_seconds = Histogram(
    name="uptime_sla_report_duration_seconds",
    documentation="Duration of one device report (all policies) in seconds",
    buckets=(
        0.0001,  # 100us
        0.0005,  # 500us
        0.001,  # 1ms
        0.005,  # 5ms
        0.01,  # 10ms
        0.05,  # 50ms
        0.1,  # 100ms
        0.5,  # 500ms
        1.0,  # 1s
    ),
)

invalid_series_total = Counter(
    name="uptime_sla_invalid_series_total",
    documentation="Total number of uptime series rejected by validation",
)

availability_ratio = Histogram(
    name="uptime_sla_availability_ratio",
    documentation="Distribution of computed availability ratios",
    labelnames=["policy"],
    buckets=(0.5, 0.9, 0.95, 0.99, 0.995, 0.999, 0.9999, 1.0),
)

# Report Job Metrics
sla_report_runs_total = Counter(
    name="uptime_sla_report_runs_total",
    documentation="Total number of SLA report job runs",
    labelnames=["status"],  # success, failure
)

sla_report_run_duration_seconds = Histogram(
    name="uptime_sla_report_run_duration_seconds",
    documentation="SLA report job duration in seconds",
    buckets=(
        0.01,  # 10ms
        0.1,  # 100ms
        1.0,  # 1s
        5.0,  # 5s
        30.0,  # 30s
        60.0,  # 1m
        300.0,  # 5m
    ),
)


def get_metrics_content() -> tuple[bytes, str]:
    """Generate Prometheus metrics in exposition format.

    Returns:
        Tuple of (metrics_bytes, content_type)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


def record_sla_report(
    availabilities: dict[str, float],
    duration: float,
) -> None:
    """Record a device report computed under every policy.

    Args:
        availabilities: Computed ratio (0.0-1.0) keyed by policy name
        duration: Report computation duration in seconds
    """
    for policy, availability in availabilities.items():
        sla_calculations_total.labels(policy=policy).inc()
        availability_ratio.labels(policy=policy).observe(availability)
    sla_report_duration_seconds.observe(duration)


def record_invalid_series() -> None:
    """Record an uptime series rejected by validation."""
    invalid_series_total.inc()


def record_sla_report_run(
    status: str,
    duration: float,
) -> None:
    """Record SLA report job run metrics.

    Args:
        status: Run status (success or failure)
        duration: Run duration in seconds
    """
    sla_report_runs_total.labels(status=status).inc()
    sla_report_run_duration_seconds.observe(duration)
