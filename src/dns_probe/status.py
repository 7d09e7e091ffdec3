"""Check outcome statuses and the process exit codes they map to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Status(Enum):
    """Outcome of one probe run."""

    PASS = "PASS"
    FAIL = "FAIL"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class ExitCodes:
    """Process exit codes for each status.

    Exit code 2 belongs to argparse (usage and configuration errors).

    Attributes:
        PASS (int): The expected value was among the answers.
        FAIL (int): The lookup answered without the expected value.
        UNKNOWN (int): The lookup itself failed, timed out or was cancelled.
    """

    PASS: int = 0
    FAIL: int = 1
    UNKNOWN: int = 3


_EXIT_CODES = {
    Status.PASS: ExitCodes.PASS,
    Status.FAIL: ExitCodes.FAIL,
    Status.UNKNOWN: ExitCodes.UNKNOWN,
}


def coerce_status(status: Union[Status, str]) -> Status:
    """Turn a status label into a Status, treating unknown labels as UNKNOWN.

    Args:
        status (Status | str): Status enum or label.

    Returns:
        Status: Matching Status value.
    """
    if isinstance(status, Status):
        return status
    try:
        return Status(status)
    except ValueError:
        return Status.UNKNOWN


def exit_code_for_status(status: Union[Status, str]) -> int:
    """Return the process exit code for a status.

    Args:
        status (Status | str): Status enum or label.

    Returns:
        int: Exit code.
    """
    return _EXIT_CODES[coerce_status(status)]


__all__ = ["ExitCodes", "Status", "coerce_status", "exit_code_for_status"]
