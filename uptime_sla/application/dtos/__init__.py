"""Application layer DTOs.

This package contains data transfer objects (DTOs) for the application layer.
Uses dataclasses (not Pydantic) per Clean Architecture principles.
"""

from uptime_sla.application.dtos.sla_report_dto import (
    PolicyResultDTO,
    SlaReportBatchResult,
    SlaReportFailure,
    SlaReportRequest,
    SlaReportResponse,
)

__all__ = [
    "SlaReportRequest",
    "PolicyResultDTO",
    "SlaReportResponse",
    "SlaReportFailure",
    "SlaReportBatchResult",
]
