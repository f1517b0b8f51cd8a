"""Interface for sourcing uptime telemetry.

This interface abstracts where uptime counter samples come from (SNMP poller,
time-series database, etc.), keeping the domain layer independent of any
specific telemetry backend.
"""

from abc import ABC, abstractmethod

from uptime_sla.domain.entities.uptime_series import UptimeSeries


class UptimeTelemetrySourceInterface(ABC):
    """Interface for querying uptime counter series per device."""

    @abstractmethod
    async def get_uptime_series(
        self, device_id: str, start_time: int, end_time: int
    ) -> UptimeSeries | None:
        """Returns the uptime samples reported inside the window.

        Args:
            device_id: Business identifier of the device (e.g., "edge-router-01")
            start_time: Start of the window (inclusive)
            end_time: End of the window (inclusive)

        Returns:
            UptimeSeries sorted by timestamp, None if the device is unknown
        """
        pass

    @abstractmethod
    async def list_device_ids(self) -> list[str]:
        """Returns the identifiers of all devices with uptime telemetry."""
        pass
