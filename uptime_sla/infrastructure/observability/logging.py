"""Structured logging configuration with OpenTelemetry integration.

Configures structlog over the standard library so that records emitted with
logging.getLogger() and structlog.get_logger() share one pipeline, tagged
with the current trace context. SNMP community strings and credentials that
ride along with telemetry metadata are masked before rendering.
"""

import logging
import sys
from typing import Any

import structlog
from opentelemetry import trace

from uptime_sla.infrastructure.config import get_settings

SENSITIVE_KEYS = frozenset(
    {
        "community",
        "snmp_community",
        "auth_key",
        "priv_key",
        "password",
        "secret",
        "token",
        "api_key",
    }
)


def configure_logging() -> None:
    """Configure structured logging with structlog.

    Log level and renderer (JSON or console) come from ObservabilitySettings.
    """
    otel_config = get_settings().observability
    level = getattr(logging, otel_config.log_level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_trace_context,
        _mask_sensitive_values,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if otel_config.log_json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _add_trace_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add trace_id and span_id of the active span, if any."""
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        event_dict["trace_id"] = format(span_context.trace_id, "032x")
        event_dict["span_id"] = format(span_context.span_id, "016x")
    return event_dict


def _mask_sensitive_values(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Mask credentials anywhere in the event, including nested dicts.

    Strings longer than four characters keep their first four characters.
    """

    def mask(key: Any, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: mask(k, v) for k, v in value.items()}
        if isinstance(key, str) and key.lower() in SENSITIVE_KEYS:
            if isinstance(value, str) and len(value) > 4:
                return f"{value[:4]}{'*' * (len(value) - 4)}"
            return "***REDACTED***"
        return value

    return {k: mask(k, v) for k, v in event_dict.items()}


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("SLA computed", device_id="edge-router-01", sla_1=0.55)
    """
    return structlog.get_logger(name)
