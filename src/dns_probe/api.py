"""Stable public API for programmatic usage."""

from __future__ import annotations

from .config import CheckConfig, RecordType, load_check_config, load_check_config_file
from .connector import FixedServerConnector
from .context import CheckContext
from .dns_resolver import DnsResolver
from .errors import (
    CheckCancelled,
    ConfigError,
    DeadlineExceeded,
    DeadlineMissingError,
    MatchFailureError,
    ProbeError,
    ResolutionError,
    UnsupportedRecordError,
)
from .models import RecordCheck
from .probe import check, execute, run
from .status import ExitCodes, Status, coerce_status, exit_code_for_status

__all__ = [
    "CheckCancelled",
    "CheckConfig",
    "CheckContext",
    "ConfigError",
    "DeadlineExceeded",
    "DeadlineMissingError",
    "DnsResolver",
    "ExitCodes",
    "FixedServerConnector",
    "MatchFailureError",
    "ProbeError",
    "RecordCheck",
    "RecordType",
    "ResolutionError",
    "Status",
    "UnsupportedRecordError",
    "check",
    "coerce_status",
    "execute",
    "exit_code_for_status",
    "load_check_config",
    "load_check_config_file",
    "run",
]
