"""Error taxonomy for DNS probe checks."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional


class ProbeError(Exception):
    """Base class for all probe failures."""


class ConfigError(ProbeError, ValueError):
    """Raised when a check configuration is missing, malformed, or out of range.

    Attributes:
        errors (List[Dict[str, str]]): Structured validation errors
            (``location`` and ``message`` keys).
    """

    def __init__(self, message: str, errors: Optional[Iterable[Dict[str, str]]] = None) -> None:
        """Initialize a configuration error.

        Args:
            message (str): Human-readable summary.
            errors (Optional[Iterable[Dict[str, str]]]): Structured validation errors.
        """
        super().__init__(message)
        self.errors: List[Dict[str, str]] = list(errors or [])


class UnsupportedRecordError(ConfigError):
    """Raised when a record type has no lookup handler."""

    def __init__(self, record_type: object) -> None:
        """Initialize an unsupported record error.

        Args:
            record_type (object): Offending record type value.
        """
        super().__init__(f"unsupported record type: {record_type}")
        self.record_type = record_type


class DeadlineMissingError(ConfigError):
    """Raised when a check is executed without a deadline on its context."""

    def __init__(self) -> None:
        """Initialize a missing deadline error."""
        super().__init__("deadline not set")


class CheckCancelled(ProbeError):
    """Raised when a check context was cancelled."""

    def __init__(self) -> None:
        """Initialize a cancellation error."""
        super().__init__("check cancelled")


class DeadlineExceeded(ProbeError):
    """Raised when a check context deadline has elapsed."""

    def __init__(self) -> None:
        """Initialize a deadline exceeded error."""
        super().__init__("deadline exceeded")


class ResolutionError(ProbeError):
    """Raised when a DNS lookup fails."""

    def __init__(self, record_type: str, name: str, error: Exception) -> None:
        """Initialize a DNS resolution error.

        Args:
            record_type (str): DNS record type being queried.
            name (str): DNS name that failed to resolve.
            error (Exception): Underlying exception.
        """
        super().__init__(f"{record_type} lookup failed for {name}: {error}")
        self.record_type = record_type
        self.name = name
        self.error = error


class MatchFailureError(ProbeError):
    """Raised when the expected value is absent from the lookup results.

    Attributes:
        expected (str): Value the check looked for.
        actual (List[str]): Every value the lookup returned, in order.
    """

    def __init__(self, expected: str, actual: Iterable[str]) -> None:
        """Initialize a match failure error.

        Args:
            expected (str): Expected value.
            actual (Iterable[str]): Observed values.
        """
        self.expected = expected
        self.actual = list(actual)
        super().__init__(
            f'expected output "{expected}" not found in [{", ".join(self.actual)}]'
        )


__all__ = [
    "CheckCancelled",
    "ConfigError",
    "DeadlineExceeded",
    "DeadlineMissingError",
    "MatchFailureError",
    "ProbeError",
    "ResolutionError",
    "UnsupportedRecordError",
]
