"""Interval reconstruction from cumulative uptime counters.

Turns a sparse series of counter readings into one (delta_time, counted_uptime)
pair per sample. Two variants exist and intentionally differ in strictness:
the presence variant answers "was the monitoring link up", the spread variant
answers "how much uptime did the device actually accumulate".
"""

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class Intervals:
    """Per-sample interval lengths and the uptime counted inside each.

    Attributes:
        delta_times: Wall-clock length of each interval
        counted_uptimes: Uptime credited to each interval
    """

    delta_times: list[int] = field(default_factory=list)
    counted_uptimes: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.delta_times)

    def close_window(self, last_timestamp: int, end_time: int) -> None:
        """Append the uncounted span between the last sample and the window end."""
        trailing = end_time - last_timestamp
        if trailing > 0:
            self.delta_times.append(trailing)
            self.counted_uptimes.append(0)

    def ratio(self) -> float:
        """Weighted availability ratio; 0.0 when the intervals span no time."""
        total = sum(self.delta_times)
        if total <= 0:
            return 0.0
        return sum(self.counted_uptimes) / total


class IntervalReconstructor:
    """Builds per-sample intervals from uptime counter samples.

    Spread algorithm:
    1. Raw deltas: the first sample credits min(value, delta); later samples
       credit the positive counter difference, a reset or flat reading
       credits 0
    2. Backward redistribution: an interval credited with more uptime than its
       length pushes the excess into the previous interval until it fits; any
       excess left at the first interval is clamped away
    """

    def presence(
        self,
        start_time: int,
        timestamps: Sequence[int],
        values: Sequence[int],
    ) -> Intervals:
        """Credit a whole interval whenever its closing reading is positive.

        Args:
            start_time: Start of the evaluation window
            timestamps: Sample timestamps in ascending order
            values: Uptime counter per sample

        Returns:
            Intervals with one entry per sample
        """
        intervals = Intervals()
        previous = start_time
        for timestamp, value in zip(timestamps, values):
            delta = timestamp - previous
            intervals.delta_times.append(delta)
            intervals.counted_uptimes.append(delta if value > 0 else 0)
            previous = timestamp
        return intervals

    def spread(
        self,
        start_time: int,
        timestamps: Sequence[int],
        values: Sequence[int],
    ) -> Intervals:
        """Spread counter increments over intervals, bounded by interval length.

        Args:
            start_time: Start of the evaluation window
            timestamps: Sample timestamps in ascending order
            values: Cumulative uptime counter per sample

        Returns:
            Intervals with 0 <= counted_uptimes[i] <= delta_times[i]
        """
        intervals = Intervals()
        deltas = intervals.delta_times
        counted = intervals.counted_uptimes

        for i, (timestamp, value) in enumerate(zip(timestamps, values)):
            if i == 0:
                delta = timestamp - start_time
                deltas.append(delta)
                counted.append(min(value, delta) if value > 0 else 0)
                continue
            deltas.append(timestamp - timestamps[i - 1])
            increment = value - values[i - 1]
            counted.append(increment if increment > 0 else 0)

        for i in range(len(deltas)):
            if counted[i] > deltas[i]:
                self._redistribute_excess(intervals, i)

        return intervals

    @staticmethod
    def _redistribute_excess(intervals: Intervals, index: int) -> None:
        """Walk backward from index, carrying uptime that overflows each interval.

        The previous interval's credit is replaced by the carried excess.
        """
        deltas = intervals.delta_times
        counted = intervals.counted_uptimes

        j = index
        while counted[j] > deltas[j]:
            if j == 0:
                counted[0] = deltas[0]
                break
            counted[j - 1] = counted[j] - deltas[j]
            counted[j] = deltas[j]
            j -= 1
