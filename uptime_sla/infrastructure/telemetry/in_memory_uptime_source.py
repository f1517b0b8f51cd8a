"""In-memory uptime telemetry source.

This module provides an implementation of UptimeTelemetrySourceInterface that
serves uptime series from seed data instead of polling devices. Useful for
development, testing, and demos.
"""

from uptime_sla.domain.entities.uptime_series import UptimeSample, UptimeSeries
from uptime_sla.domain.repositories.uptime_telemetry_source import (
    UptimeTelemetrySourceInterface,
)
from uptime_sla.infrastructure.telemetry.seed_data import SEED_SERIES


class InMemoryUptimeSource(UptimeTelemetrySourceInterface):
    """Uptime telemetry source backed by a dict of device samples."""

    def __init__(self, seed_series: dict[str, list[UptimeSample]] | None = None):
        """Initialize source with optional custom seed data.

        Args:
            seed_series: Optional {device_id: samples} mapping
                (defaults to SEED_SERIES from seed_data.py)
        """
        self._series = seed_series if seed_series is not None else SEED_SERIES

    async def get_uptime_series(
        self, device_id: str, start_time: int, end_time: int
    ) -> UptimeSeries | None:
        """Get the seeded samples of a device that fall inside the window.

        Samples are sorted by timestamp; the stable sort keeps the original
        order of samples sharing a timestamp.
        """
        samples = self._series.get(device_id)
        if samples is None:
            return None

        ordered = sorted(samples, key=lambda s: s.timestamp)
        return UptimeSeries(device_id=device_id, samples=ordered).within(
            start_time, end_time
        )

    async def list_device_ids(self) -> list[str]:
        return sorted(self._series)
