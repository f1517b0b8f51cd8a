"""
Uptime SLA Calculator - Command-line Demo
Evaluates the seeded reference device under every availability policy and
logs the results, then runs the report job over all seeded devices.

Usage:
    python demo/sla_demo.py
"""

import asyncio

from uptime_sla.domain.entities.uptime_series import UptimeState
from uptime_sla.domain.services.uptime_sla_calculator import UptimeSlaCalculator
from uptime_sla.infrastructure.observability import (
    configure_logging,
    get_logger,
    setup_tracing,
)
from uptime_sla.infrastructure.tasks import run_sla_reports
from uptime_sla.infrastructure.telemetry.seed_data import (
    REFERENCE_WINDOW,
    SEED_SERIES,
)

logger = get_logger("sla_demo")


def print_reference_device() -> None:
    start_time, end_time = REFERENCE_WINDOW
    samples = SEED_SERIES["edge-router-01"]

    # Prepare the data
    timestamps = [s.timestamp for s in samples]
    uptime_values = [s.value for s in samples]
    exceptions = [s.is_exception for s in samples]

    calc = UptimeSlaCalculator()

    snmp_sla = calc.connectivity_availability(start_time, end_time, timestamps, uptime_values)
    logger.info(f"Connectivity SLA: {snmp_sla:.5f}")
    uptime_sla = calc.uptime_availability(start_time, end_time, timestamps, uptime_values)
    logger.info(f"Uptime SLA: {uptime_sla:.5f}")
    sla1 = calc.policy1_availability(start_time, end_time, timestamps, uptime_values)
    logger.info(f"(Custom) SLA 1: {sla1:.5f}")
    sla2 = calc.policy2_availability(
        start_time, end_time, timestamps, uptime_values, exceptions
    )
    logger.info(f"(Custom) SLA 2: {sla2:.5f}")

    states = calc.state_series(start_time, end_time, timestamps, uptime_values)
    logger.info(
        "State series",
        up=states.count(UptimeState.UP),
        down=states.count(UptimeState.DOWN),
        open=states.count(UptimeState.OPEN),
    )


async def main() -> None:
    configure_logging()
    setup_tracing()
    print_reference_device()

    _, end_time = REFERENCE_WINDOW
    result = await run_sla_reports(end_time=end_time, start_time=REFERENCE_WINDOW[0])
    for report in result.reports:
        logger.info(
            "Device report",
            device_id=report.device_id,
            **{p: round(r.availability, 5) for p, r in report.policies.items()},
        )


if __name__ == "__main__":
    asyncio.run(main())
