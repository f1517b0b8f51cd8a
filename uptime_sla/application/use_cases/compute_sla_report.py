"""Compute SLA Report Use Case.

Fetches a device's uptime series and evaluates it under every availability
policy, together with the per-sample state series.
"""

import logging

from uptime_sla.application.dtos.sla_report_dto import (
    PolicyResultDTO,
    SlaReportRequest,
    SlaReportResponse,
)
from uptime_sla.domain.entities.uptime_series import AvailabilityPolicy
from uptime_sla.domain.repositories.uptime_telemetry_source import (
    UptimeTelemetrySourceInterface,
)
from uptime_sla.domain.services.uptime_sla_calculator import UptimeSlaCalculator

logger = logging.getLogger(__name__)


class SeriesNotFoundError(LookupError):
    """Raised when the telemetry source has no series for a device."""


class ComputeSlaReportUseCase:
    """Compute connectivity, uptime, SLA 1 and SLA 2 availability for a device.

    The calculator validates the series before computing anything, so an
    InvalidArgumentError from a malformed series propagates unchanged.
    """

    def __init__(
        self,
        telemetry_source: UptimeTelemetrySourceInterface,
        calculator: UptimeSlaCalculator,
        default_target_availability: float | None = None,
    ) -> None:
        """Initialize use case with injected dependencies.

        Args:
            telemetry_source: Uptime telemetry data source
            calculator: Domain SLA calculator
            default_target_availability: Target used when the request has none
        """
        self._telemetry = telemetry_source
        self._calculator = calculator
        self._default_target = default_target_availability

    async def execute(self, request: SlaReportRequest) -> SlaReportResponse:
        """Execute the SLA report computation.

        Args:
            request: Device and window to evaluate

        Returns:
            SlaReportResponse with one PolicyResultDTO per policy

        Raises:
            SeriesNotFoundError: If the source has no series for the device
            InvalidArgumentError: If the window or series is malformed
        """
        series = await self._telemetry.get_uptime_series(
            device_id=request.device_id,
            start_time=request.start_time,
            end_time=request.end_time,
        )
        if series is None:
            raise SeriesNotFoundError(
                f"No uptime series found for device '{request.device_id}'"
            )

        timestamps = series.timestamps
        values = series.values
        exceptions = series.exceptions

        target = (
            request.target_availability
            if request.target_availability is not None
            else self._default_target
        )

        policies = {}
        for policy in AvailabilityPolicy:
            availability = self._calculator.availability(
                policy,
                request.start_time,
                request.end_time,
                timestamps,
                values,
                exceptions,
            )
            policies[policy.value] = PolicyResultDTO(
                policy=policy.value,
                availability=availability,
                sla_met=availability >= target if target is not None else None,
            )

        states = self._calculator.state_series(
            request.start_time, request.end_time, timestamps, values
        )

        logger.info(
            f"SLA report computed for device={request.device_id}: "
            f"samples={len(series)}, "
            + ", ".join(f"{p}={r.availability:.5f}" for p, r in policies.items())
        )

        return SlaReportResponse(
            device_id=request.device_id,
            start_time=request.start_time,
            end_time=request.end_time,
            sample_count=len(series),
            target_availability=target,
            policies=policies,
            states=[state.value for state in states],
        )
