"""Background job for computing SLA reports.

Runs the SLA report use case for every requested device, logging and
recording metrics for each run. Per-device failures are collected in the
result rather than raised so one bad series cannot stop the whole run.
"""

import time

import structlog

from uptime_sla.application.dtos.sla_report_dto import (
    SlaReportBatchResult,
    SlaReportFailure,
    SlaReportRequest,
)
from uptime_sla.application.use_cases.compute_sla_report import (
    ComputeSlaReportUseCase,
    SeriesNotFoundError,
)
from uptime_sla.domain.repositories.uptime_telemetry_source import (
    UptimeTelemetrySourceInterface,
)
from uptime_sla.domain.services.series_validator import InvalidArgumentError
from uptime_sla.domain.services.uptime_sla_calculator import UptimeSlaCalculator
from uptime_sla.infrastructure.config import get_settings
from uptime_sla.infrastructure.observability.metrics import (
    record_invalid_series,
    record_sla_report,
    record_sla_report_run,
)
from uptime_sla.infrastructure.observability.tracing import get_tracer
from uptime_sla.infrastructure.telemetry.in_memory_uptime_source import (
    InMemoryUptimeSource,
)

logger = structlog.get_logger(__name__)
tracer = get_tracer(__name__)


async def run_sla_reports(
    end_time: int,
    start_time: int | None = None,
    device_ids: list[str] | None = None,
    telemetry_source: UptimeTelemetrySourceInterface | None = None,
) -> SlaReportBatchResult:
    """Compute SLA reports for a set of devices over one window.

    Args:
        end_time: End of the evaluation window
        start_time: Start of the window (default: end_time minus the
            configured default window, floored at 0)
        device_ids: Devices to report on (default: every device in the source)
        telemetry_source: Uptime data source (default: in-memory seed data)

    Returns:
        SlaReportBatchResult with the reports and per-device failures
    """
    settings = get_settings()
    if start_time is None:
        start_time = max(0, end_time - settings.sla.default_window_seconds)
    source = telemetry_source or InMemoryUptimeSource()

    use_case = ComputeSlaReportUseCase(
        telemetry_source=source,
        calculator=UptimeSlaCalculator(),
        default_target_availability=settings.sla.target_availability,
    )

    logger.info(
        "Starting SLA report run",
        start_time=start_time,
        end_time=end_time,
    )
    run_started = time.perf_counter()
    status = "failure"
    reports = []
    failures = []
    total_devices = 0

    try:
        if device_ids is None:
            device_ids = await source.list_device_ids()
        total_devices = len(device_ids)

        for device_id in device_ids:
            request = SlaReportRequest(
                device_id=device_id, start_time=start_time, end_time=end_time
            )
            with tracer.start_as_current_span("sla_report") as span:
                span.set_attribute("device_id", device_id)
                report_started = time.perf_counter()
                try:
                    report = await use_case.execute(request)
                except InvalidArgumentError as e:
                    record_invalid_series()
                    logger.warning(
                        "Rejected malformed uptime series",
                        device_id=device_id,
                        error_message=str(e),
                    )
                    failures.append(SlaReportFailure(device_id, str(e)))
                    continue
                except SeriesNotFoundError as e:
                    logger.warning(
                        "No uptime series for device",
                        device_id=device_id,
                    )
                    failures.append(SlaReportFailure(device_id, str(e)))
                    continue

            record_sla_report(
                {p: r.availability for p, r in report.policies.items()},
                duration=time.perf_counter() - report_started,
            )
            reports.append(report)

        status = "success"

    except Exception as e:
        logger.exception(
            "Unexpected error during SLA report run",
            error=str(e),
            error_type=type(e).__name__,
        )

    finally:
        duration = time.perf_counter() - run_started
        record_sla_report_run(status=status, duration=duration)

        logger.info(
            "SLA report run completed",
            status=status,
            successful_count=len(reports),
            failed_count=len(failures),
            duration_seconds=round(duration, 4),
        )

    return SlaReportBatchResult(
        total_devices=total_devices,
        successful_count=len(reports),
        failed_count=len(failures),
        reports=reports,
        failures=failures,
    )
