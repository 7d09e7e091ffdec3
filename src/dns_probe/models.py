"""Check outcome models."""

from __future__ import annotations

import dataclasses
from typing import Dict, Optional

from .status import Status, coerce_status


@dataclasses.dataclass
class RecordCheck:
    """Represent the outcome of one probe run.

    Attributes:
        record_type (str): DNS record type that was queried (e.g., A, MX).
        status (Status): Result status.
        message (str): Human-readable summary of the outcome.
        details (Dict[str, object]): Structured details for debugging or output.
    """

    record_type: str
    status: Status
    message: str
    details: Dict[str, object]

    def __post_init__(self) -> None:
        """Normalize the status value."""
        if not isinstance(self.status, Status):
            self.status = coerce_status(self.status)

    @classmethod
    def with_status(
        cls,
        record_type: str,
        status: Status,
        message: str,
        details: Optional[Dict[str, object]] = None,
    ) -> "RecordCheck":
        """Build a RecordCheck for a specific status.

        Args:
            record_type (str): DNS record type that was queried.
            status (Status): Status to assign.
            message (str): Human-readable summary of the outcome.
            details (Optional[Dict[str, object]]): Structured details for output.

        Returns:
            RecordCheck: Record check result.
        """
        return cls(record_type, status, message, details or {})

    @classmethod
    def pass_(
        cls,
        record_type: str,
        message: str,
        details: Optional[Dict[str, object]] = None,
    ) -> "RecordCheck":
        """Build a passing RecordCheck.

        Args:
            record_type (str): DNS record type that was queried.
            message (str): Human-readable summary of the outcome.
            details (Optional[Dict[str, object]]): Structured details for output.

        Returns:
            RecordCheck: Record check result with PASS status.
        """
        return cls.with_status(record_type, Status.PASS, message, details)

    @classmethod
    def fail(
        cls,
        record_type: str,
        message: str,
        details: Optional[Dict[str, object]] = None,
    ) -> "RecordCheck":
        """Build a failed RecordCheck.

        Args:
            record_type (str): DNS record type that was queried.
            message (str): Human-readable summary of the outcome.
            details (Optional[Dict[str, object]]): Structured details for output.

        Returns:
            RecordCheck: Record check result with FAIL status.
        """
        return cls.with_status(record_type, Status.FAIL, message, details)

    @classmethod
    def unknown(
        cls,
        record_type: str,
        message: str,
        details: Optional[Dict[str, object]] = None,
    ) -> "RecordCheck":
        """Build an unknown RecordCheck.

        Args:
            record_type (str): DNS record type that was queried.
            message (str): Human-readable summary of the outcome.
            details (Optional[Dict[str, object]]): Structured details for output.

        Returns:
            RecordCheck: Record check result with UNKNOWN status.
        """
        return cls.with_status(record_type, Status.UNKNOWN, message, details)


__all__ = ["RecordCheck"]
