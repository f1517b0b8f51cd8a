"""Use cases - Application-specific business rules.

This package contains use cases that orchestrate domain logic
and implement application-specific workflows.
"""

from uptime_sla.application.use_cases.compute_sla_report import (
    ComputeSlaReportUseCase,
    SeriesNotFoundError,
)

__all__ = [
    "ComputeSlaReportUseCase",
    "SeriesNotFoundError",
]
