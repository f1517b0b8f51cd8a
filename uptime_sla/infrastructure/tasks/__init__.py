"""Background jobs.

This package contains the SLA report job that evaluates uptime series for
many devices at once.
"""

from uptime_sla.infrastructure.tasks.sla_reports import run_sla_reports

__all__ = [
    "run_sla_reports",
]
