"""Seed data for the in-memory uptime telemetry source.

This module provides uptime counter series for development, tests and demos,
covering counter resets, maintenance exceptions, unobserved starts and open
trailing runs.
"""

from uptime_sla.domain.entities.uptime_series import UptimeSample

REFERENCE_WINDOW = (10000, 13000)


def generate_steady_series(
    start_time: int,
    end_time: int,
    step: int,
    initial_uptime: int = 0,
) -> list[UptimeSample]:
    """Generate samples of a device that stays up for the whole window.

    Args:
        start_time: Time of the window start (the first sample is one step later)
        end_time: Last sample time (inclusive)
        step: Polling interval
        initial_uptime: Counter value at start_time

    Returns:
        One sample per step with the counter advancing by step each time
    """
    samples = []
    uptime = initial_uptime
    for timestamp in range(start_time + step, end_time + 1, step):
        uptime += step
        samples.append(UptimeSample(timestamp=timestamp, value=uptime))
    return samples


# Seed data dictionary: device_id -> samples
SEED_SERIES: dict[str, list[UptimeSample]] = {
    # Scenario 1: Reference series polled every 100s over [10000, 13000].
    # Unobserved start, resets at 10900->11000 and 11500->11600, a connectivity
    # gap at 12200-12400, and two maintenance samples before an open tail.
    "edge-router-01": [
        UptimeSample(10100, 0),
        UptimeSample(10200, 0),
        UptimeSample(10300, 0),
        UptimeSample(10400, 0),
        UptimeSample(10500, 270),
        UptimeSample(10600, 370),
        UptimeSample(10700, 470),
        UptimeSample(10800, 570),
        UptimeSample(10900, 670),
        UptimeSample(11000, 40),
        UptimeSample(11100, 140),
        UptimeSample(11200, 240),
        UptimeSample(11300, 340),
        UptimeSample(11400, 440),
        UptimeSample(11500, 540),
        UptimeSample(11600, 0),
        UptimeSample(11700, 0),
        UptimeSample(11800, 840),
        UptimeSample(11900, 940),
        UptimeSample(12000, 1040),
        UptimeSample(12100, 1140),
        UptimeSample(12200, 0),
        UptimeSample(12300, 0),
        UptimeSample(12400, 0),
        UptimeSample(12500, 10),
        UptimeSample(12600, 110),
        UptimeSample(12700, 210),
        UptimeSample(12800, 0, is_exception=True),
        UptimeSample(12900, 0, is_exception=True),
        UptimeSample(13000, 0),
    ],
    # Scenario 2: Device up for the whole window
    "core-switch-01": generate_steady_series(10000, 13000, 100, initial_uptime=5000),
    # Scenario 3: Device never reported a positive counter
    "access-point-07": [
        UptimeSample(timestamp, 0) for timestamp in range(10100, 13001, 100)
    ],
    # Scenario 4: Device stops reporting half way through the window
    "edge-router-02": generate_steady_series(10000, 11500, 100),
}


def get_device_samples(device_id: str) -> list[UptimeSample] | None:
    """Get seeded samples for a device.

    Args:
        device_id: Business identifier of the device

    Returns:
        Samples if the device is seeded, None otherwise
    """
    return SEED_SERIES.get(device_id)
