"""Repository interfaces - Abstract data access contracts."""

from uptime_sla.domain.repositories.uptime_telemetry_source import (
    UptimeTelemetrySourceInterface,
)

__all__ = [
    "UptimeTelemetrySourceInterface",
]
