"""OpenTelemetry distributed tracing setup.

Configures the OpenTelemetry SDK with an OTLP exporter so SLA report runs can
be correlated with the telemetry pipeline that produced their input.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from uptime_sla.infrastructure.config import get_settings

logger = logging.getLogger(__name__)


def _service_version() -> str:
    try:
        return version("uptime-sla")
    except PackageNotFoundError:
        return "0.0.0"


def setup_tracing() -> TracerProvider:
    """Setup OpenTelemetry tracing with OTLP exporter.

    Configures:
    - TracerProvider with service name, version and environment
    - Trace sampling based on configured sample rate
    - OTLP exporter with batched span export

    Returns:
        TracerProvider instance
    """
    settings = get_settings()
    otel_config = settings.observability

    resource = Resource.create(
        {
            "service.name": otel_config.service_name,
            "service.version": _service_version(),
            "deployment.environment": settings.environment,
        }
    )

    sampler = TraceIdRatioBased(otel_config.trace_sample_rate)
    provider = TracerProvider(resource=resource, sampler=sampler)

    try:
        otlp_exporter = OTLPSpanExporter(
            endpoint=otel_config.exporter_otlp_endpoint,
            insecure=True,  # Use False in production with TLS
        )
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

        logger.info(
            "OpenTelemetry tracing configured",
            extra={
                "service_name": otel_config.service_name,
                "otlp_endpoint": otel_config.exporter_otlp_endpoint,
                "sample_rate": otel_config.trace_sample_rate,
            },
        )
    except Exception as e:
        logger.warning(
            "Failed to configure OTLP exporter, tracing will be disabled",
            extra={"error": str(e)},
        )

    trace.set_tracer_provider(provider)
    return provider


def get_tracer(name: str) -> trace.Tracer:
    """Get OpenTelemetry tracer for manual instrumentation.

    Example:
        >>> tracer = get_tracer(__name__)
        >>> with tracer.start_as_current_span("sla_report") as span:
        ...     span.set_attribute("device_id", "edge-router-01")
    """
    return trace.get_tracer(name)
