"""Input validation for uptime series.

Every SLA calculation validates its arguments here before doing any work, so a
malformed series is rejected without partial results.
"""

from collections.abc import Sequence


class InvalidArgumentError(ValueError):
    """Raised when a window or uptime series is malformed."""


class SeriesValidator:
    """Validates SLA calculation windows and uptime series.

    Checks run in a fixed order and the first failure is reported:
    1. Window bounds are non-negative
    2. The series is not empty
    3. The window covers the first and last timestamps
    4. Parallel arrays have matching lengths
    5. Timestamps are non-decreasing (ties allowed)
    """

    @staticmethod
    def validate(
        start_time: int,
        end_time: int,
        timestamps: Sequence[int],
        values: Sequence[int],
        exceptions: Sequence[bool] | None = None,
    ) -> None:
        """Validate a calculation window and its series.

        Args:
            start_time: Start of the evaluation window
            end_time: End of the evaluation window
            timestamps: Sample timestamps in ascending order
            values: Cumulative uptime counter per sample
            exceptions: Optional exception flag per sample

        Raises:
            InvalidArgumentError: If any check fails
        """
        if start_time < 0 or end_time < 0:
            raise InvalidArgumentError("Start or end time is less than 0")
        if len(timestamps) == 0:
            raise InvalidArgumentError("Timestamp array is empty")
        if start_time > timestamps[0]:
            raise InvalidArgumentError("Start time is greater than the first timestamp")
        if end_time < timestamps[-1]:
            raise InvalidArgumentError("End time is less than the last timestamp")

        if len(timestamps) != len(values):
            raise InvalidArgumentError(
                f"Length of timestamps ({len(timestamps)}) and uptime values "
                f"({len(values)}) is unmatched"
            )
        if exceptions is not None and len(timestamps) != len(exceptions):
            raise InvalidArgumentError(
                f"Length of timestamps ({len(timestamps)}) and exceptions "
                f"({len(exceptions)}) is unmatched"
            )

        for i in range(1, len(timestamps)):
            if timestamps[i] < timestamps[i - 1]:
                raise InvalidArgumentError(
                    f"Unordered timestamps detected at index {i}: "
                    f"{timestamps[i]} < {timestamps[i - 1]}"
                )
