"""Domain services - Business logic that doesn't fit in entities."""

from uptime_sla.domain.services.interval_reconstructor import (
    IntervalReconstructor,
    Intervals,
)
from uptime_sla.domain.services.series_validator import (
    InvalidArgumentError,
    SeriesValidator,
)
from uptime_sla.domain.services.uptime_sla_calculator import UptimeSlaCalculator

__all__ = [
    "IntervalReconstructor",
    "Intervals",
    "InvalidArgumentError",
    "SeriesValidator",
    "UptimeSlaCalculator",
]
