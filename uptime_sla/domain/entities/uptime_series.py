"""Domain entities for uptime telemetry series.

This module defines the value objects the SLA calculator works on: individual
counter samples, the per-device series they form, and the closed label sets
used for per-sample states and availability policies.
"""

from dataclasses import dataclass, field
from enum import Enum


class UptimeState(str, Enum):
    """State of a single uptime sample."""

    UP = "up"
    DOWN = "down"
    OPEN = "open"


class AvailabilityPolicy(str, Enum):
    """Accounting policy used to turn uptime samples into an availability ratio."""

    CONNECTIVITY = "connectivity"
    UPTIME = "uptime"
    SLA_1 = "sla_1"
    SLA_2 = "sla_2"


@dataclass(frozen=True)
class UptimeSample:
    """A single cumulative uptime counter reading.

    Attributes:
        timestamp: Time of the reading (caller-defined unit, e.g. seconds)
        value: Cumulative uptime counter; may drop on device restart
        is_exception: True if the sample falls in a justified down period
            (e.g. scheduled maintenance) that must count as available
    """

    timestamp: int
    value: int
    is_exception: bool = False


@dataclass
class UptimeSeries:
    """Ordered uptime samples reported by one monitored device.

    The projections below always return new lists so callers can hand them
    to the calculator without sharing state with the series.

    Attributes:
        device_id: Business identifier of the device (e.g., "edge-router-01")
        samples: Samples in ascending timestamp order
    """

    device_id: str
    samples: list[UptimeSample] = field(default_factory=list)

    @property
    def timestamps(self) -> list[int]:
        return [s.timestamp for s in self.samples]

    @property
    def values(self) -> list[int]:
        return [s.value for s in self.samples]

    @property
    def exceptions(self) -> list[bool]:
        return [s.is_exception for s in self.samples]

    def __len__(self) -> int:
        return len(self.samples)

    def within(self, start_time: int, end_time: int) -> "UptimeSeries":
        """Return the samples whose timestamp lies inside [start_time, end_time]."""
        return UptimeSeries(
            device_id=self.device_id,
            samples=[s for s in self.samples if start_time <= s.timestamp <= end_time],
        )
