"""Uptime SLA availability calculator.

Computes availability ratios over a time window from cumulative uptime counter
samples, under four accounting policies, and classifies each sample as up,
down or open.
"""

from collections.abc import Sequence

from uptime_sla.domain.entities.uptime_series import AvailabilityPolicy, UptimeState
from uptime_sla.domain.services.interval_reconstructor import (
    IntervalReconstructor,
    Intervals,
)
from uptime_sla.domain.services.series_validator import (
    InvalidArgumentError,
    SeriesValidator,
)


class UptimeSlaCalculator:
    """Calculates uptime SLA ratios with connectivity, uptime and custom policies.

    Every calculation follows the same pipeline:
    1. Validate the window and series
    2. Reconstruct per-sample intervals (presence or spread variant)
    3. Apply the policy-specific adjustment
    4. Close the window with an uncounted trailing interval
    5. Return counted time over elapsed time

    All methods are pure; caller sequences are never modified.
    """

    def __init__(self, reconstructor: IntervalReconstructor | None = None) -> None:
        self._reconstructor = reconstructor or IntervalReconstructor()

    def validate(
        self,
        start_time: int,
        end_time: int,
        timestamps: Sequence[int],
        values: Sequence[int],
        exceptions: Sequence[bool] | None = None,
    ) -> None:
        """Validate a window and series (raises InvalidArgumentError)."""
        SeriesValidator.validate(start_time, end_time, timestamps, values, exceptions)

    def connectivity_availability(
        self,
        start_time: int,
        end_time: int,
        timestamps: Sequence[int],
        values: Sequence[int],
    ) -> float:
        """Availability based on the presence of a positive reading per interval.

        Answers "was the monitoring connection up".

        Raises:
            InvalidArgumentError: If the window or series is malformed
        """
        self.validate(start_time, end_time, timestamps, values)
        intervals = self._reconstructor.presence(start_time, timestamps, values)
        return self._finish(intervals, timestamps, end_time)

    def uptime_availability(
        self,
        start_time: int,
        end_time: int,
        timestamps: Sequence[int],
        values: Sequence[int],
    ) -> float:
        """Availability based on accumulated device uptime.

        Answers "was the device itself up", regardless of connectivity gaps.

        Raises:
            InvalidArgumentError: If the window or series is malformed
        """
        self.validate(start_time, end_time, timestamps, values)
        intervals = self._reconstructor.spread(start_time, timestamps, values)
        return self._finish(intervals, timestamps, end_time)

    def policy1_availability(
        self,
        start_time: int,
        end_time: int,
        timestamps: Sequence[int],
        values: Sequence[int],
    ) -> float:
        """SLA 1: connectivity availability that also regards the device state.

        Time before the first positive reading is not yet observed and is not
        counted. Afterwards an interval with a non-positive reading counts as
        down even if the device accumulated uptime in it (connectivity was
        lost); other intervals keep their spread uptime. A trailing run of
        non-positive readings is never counted.

        Raises:
            InvalidArgumentError: If the window or series is malformed
        """
        self.validate(start_time, end_time, timestamps, values)
        intervals = self._reconstructor.spread(start_time, timestamps, values)
        self._apply_open_state(intervals, values)
        return self._finish(intervals, timestamps, end_time)

    def policy2_availability(
        self,
        start_time: int,
        end_time: int,
        timestamps: Sequence[int],
        values: Sequence[int],
        exceptions: Sequence[bool],
    ) -> float:
        """SLA 2: SLA 1 where exception samples always count as available.

        Exceptions are justified down periods such as scheduled maintenance.

        Raises:
            InvalidArgumentError: If the window or series is malformed
        """
        if exceptions is None:
            raise InvalidArgumentError("Exceptions are required for SLA 2")
        self.validate(start_time, end_time, timestamps, values, exceptions)
        intervals = self._reconstructor.spread(start_time, timestamps, values)
        self._apply_open_state(intervals, values, exceptions)
        return self._finish(intervals, timestamps, end_time)

    def state_series(
        self,
        start_time: int,
        end_time: int,
        timestamps: Sequence[int],
        values: Sequence[int],
    ) -> list[UptimeState]:
        """Label every sample as up, down or open.

        Raises:
            InvalidArgumentError: If the window or series is malformed
        """
        self.validate(start_time, end_time, timestamps, values)
        intervals = self._reconstructor.spread(start_time, timestamps, values)

        states = [
            UptimeState.UP if counted > 0 else UptimeState.DOWN
            for counted in intervals.counted_uptimes
        ]
        for i in self._trailing_non_positive(values):
            states[i] = UptimeState.OPEN
        return states

    def availability(
        self,
        policy: AvailabilityPolicy,
        start_time: int,
        end_time: int,
        timestamps: Sequence[int],
        values: Sequence[int],
        exceptions: Sequence[bool] | None = None,
    ) -> float:
        """Dispatch to the calculation for the given policy."""
        if policy == AvailabilityPolicy.CONNECTIVITY:
            return self.connectivity_availability(start_time, end_time, timestamps, values)
        if policy == AvailabilityPolicy.UPTIME:
            return self.uptime_availability(start_time, end_time, timestamps, values)
        if policy == AvailabilityPolicy.SLA_1:
            return self.policy1_availability(start_time, end_time, timestamps, values)
        if exceptions is None:
            exceptions = [False] * len(timestamps)
        return self.policy2_availability(
            start_time, end_time, timestamps, values, exceptions
        )

    def _apply_open_state(
        self,
        intervals: Intervals,
        values: Sequence[int],
        exceptions: Sequence[bool] | None = None,
    ) -> None:
        """Rewrite spread intervals in place for the SLA 1 / SLA 2 policies."""
        deltas = intervals.delta_times
        counted = intervals.counted_uptimes

        is_open = True
        for i, value in enumerate(values):
            if exceptions is not None and exceptions[i]:
                counted[i] = deltas[i]
                continue
            if is_open and value > 0:
                is_open = False
            if is_open:
                counted[i] = 0
            elif value <= 0 and counted[i] > 0:
                counted[i] = 0

        # Open end: the unresolved trailing run is never credited
        for i in self._trailing_non_positive(values):
            if exceptions is not None and exceptions[i]:
                continue
            counted[i] = 0

    @staticmethod
    def _trailing_non_positive(values: Sequence[int]) -> list[int]:
        """Indices of the trailing run of non-positive readings, last first."""
        indices = []
        for i in range(len(values) - 1, -1, -1):
            if values[i] > 0:
                break
            indices.append(i)
        return indices

    @staticmethod
    def _finish(
        intervals: Intervals, timestamps: Sequence[int], end_time: int
    ) -> float:
        intervals.close_window(timestamps[-1], end_time)
        return intervals.ratio()
