"""Uptime telemetry sources."""

from uptime_sla.infrastructure.telemetry.in_memory_uptime_source import (
    InMemoryUptimeSource,
)

__all__ = [
    "InMemoryUptimeSource",
]
