"""Domain entities - Core business objects."""

from uptime_sla.domain.entities.uptime_series import (
    AvailabilityPolicy,
    UptimeSample,
    UptimeSeries,
    UptimeState,
)

__all__ = [
    # Series
    "UptimeSample",
    "UptimeSeries",
    # Labels
    "UptimeState",
    "AvailabilityPolicy",
]
