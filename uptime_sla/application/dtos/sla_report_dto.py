"""Data Transfer Objects for SLA report computation.

DTOs for use case input/output in the application layer.
These are dataclasses (not Pydantic) following Clean Architecture principles.
"""

from dataclasses import dataclass, field


@dataclass
class SlaReportRequest:
    """Request to compute SLA availability for one device over a window."""

    device_id: str  # Business identifier (e.g., "edge-router-01")
    start_time: int
    end_time: int
    target_availability: float | None = None  # 0.0-1.0, overrides configured target


@dataclass
class PolicyResultDTO:
    """Availability under a single accounting policy."""

    policy: str  # "connectivity" | "uptime" | "sla_1" | "sla_2"
    availability: float  # 0.0 to 1.0
    sla_met: bool | None = None  # None when no target is configured


@dataclass
class SlaReportResponse:
    """Availability of a device under every policy, plus per-sample states."""

    device_id: str
    start_time: int
    end_time: int
    sample_count: int
    target_availability: float | None = None
    policies: dict[str, PolicyResultDTO] = field(default_factory=dict)
    states: list[str] = field(default_factory=list)  # "up" | "down" | "open"


@dataclass
class SlaReportFailure:
    """A device whose report could not be computed."""

    device_id: str
    error_message: str


@dataclass
class SlaReportBatchResult:
    """Result of computing reports for several devices."""

    total_devices: int
    successful_count: int
    failed_count: int
    reports: list[SlaReportResponse] = field(default_factory=list)
    failures: list[SlaReportFailure] = field(default_factory=list)
