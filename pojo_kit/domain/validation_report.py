"""
Validation report types.

Records what a harness run did for each property so the CLI (and callers
who want more than ``True``) can present it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ValidationStatus(Enum):
    """Outcome of a validation step."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"

    def is_success(self) -> bool:
        """Check if status indicates success."""
        return self in (ValidationStatus.PASSED, ValidationStatus.SKIPPED)


class PropertyCheck(Enum):
    """Which check a property outcome belongs to."""

    ROUND_TRIP = "round-trip"
    DIRECT_FIELD = "direct-field"
    EQUALITY = "equality"


@dataclass
class PropertyOutcome:
    """Result of exercising one property."""

    name: str
    check: PropertyCheck
    status: ValidationStatus
    detail: str = ""


@dataclass
class ValidationReport:
    """Result of validating one class."""

    target: type
    status: ValidationStatus = ValidationStatus.PASSED
    constructor: str | None = None
    outcomes: list[PropertyOutcome] = field(default_factory=list)
    error_message: str | None = None
    execution_time: float | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_success(self) -> bool:
        """Check if validation passed."""
        return self.status.is_success()

    def record(
        self,
        name: str,
        check: PropertyCheck,
        status: ValidationStatus = ValidationStatus.PASSED,
        detail: str = "",
    ) -> PropertyOutcome:
        """Append an outcome for ``name``."""
        outcome = PropertyOutcome(name, check, status, detail)
        self.outcomes.append(outcome)
        return outcome

    def fail(self, error: BaseException) -> None:
        """Mark the report failed with ``error``."""
        self.status = ValidationStatus.FAILED
        self.error_message = str(error)

    def count(self, status: ValidationStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary representation."""
        return {
            "target": f"{self.target.__module__}.{self.target.__qualname__}",
            "status": self.status.value,
            "constructor": self.constructor,
            "outcomes": [
                {
                    "name": o.name,
                    "check": o.check.value,
                    "status": o.status.value,
                    "detail": o.detail,
                }
                for o in self.outcomes
            ],
            "error_message": self.error_message,
            "execution_time": self.execution_time,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        name = self.target.__qualname__
        if self.is_success():
            return f"PASSED: {name} ({len(self.outcomes)} checks)"
        return f"FAILED: {name}: {self.error_message}"
