"""
jsoncheck.model
AUTHOR: carter-vin

Check outcome primitives + status line rendering.

Design goals:
- Closed status set mapped directly onto plugin exit codes
- Hard errors (error set) kept distinct from failed checks (message only)
- Explicit structure (no accidental serialization via __dict__)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

CHECK_VERSION = "0.1.0"


class Status(IntEnum):
    """
    Plugin status; value is the process exit code
    """

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class CheckOutcome:
    """
    Terminal result of one check run
    - status: severity reported to the monitoring framework
    - message: human-readable summary
    - error: set only when the run errored (fetch, parse, query, extraction)
    - value: extracted value, when extraction got that far
    """

    status: Status
    message: str
    error: Optional[str] = None
    value: Optional[float] = None

    @property
    def errored(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.name,
            "message": self.message,
            "error": self.error,
            "value": self.value,
        }


def ok(message: str, *, value: Optional[float] = None) -> CheckOutcome:
    return CheckOutcome(status=Status.OK, message=message, value=value)


def warning(message: str, *, value: Optional[float] = None) -> CheckOutcome:
    return CheckOutcome(status=Status.WARNING, message=message, value=value)


def critical(message: str, *, value: Optional[float] = None) -> CheckOutcome:
    return CheckOutcome(status=Status.CRITICAL, message=message, value=value)


def errored(error: str) -> CheckOutcome:
    """
    Hard error: CRITICAL with the error attached
    """
    return CheckOutcome(status=Status.CRITICAL, message=error, error=error)


def _format_perf_value(value: float) -> str:
    # Perfdata wants plain numbers; drop the trailing .0 of integral values
    if value.is_integer():
        return str(int(value))
    return repr(value)


def render_status_line(outcome: CheckOutcome) -> str:
    """
    Render outcome in Nagios plugin format

    STATUS - message | value=<v>
    """
    line = f"{outcome.status.name} - {outcome.message}"
    if outcome.value is not None and math.isfinite(outcome.value):
        line += f" | value={_format_perf_value(outcome.value)}"
    return line
