"""Argument parser helpers for the CLI."""

from __future__ import annotations

import argparse
import functools
import logging
import time

from .. import __version__
from ..record_registry import SUPPORTED_RECORD_TYPES
from .parsing import _parse_positive_float

DEFAULT_TIMEOUT = 5.0


def _setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbosity (int): Verbosity count from CLI flags.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.Formatter.converter = time.gmtime  # UTC timestamps
    logging.basicConfig(
        level=level,
        format="%(asctime)sZ [%(levelname)s] %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    parser = argparse.ArgumentParser(
        description="Query one DNS server and require an expected value in the answer",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    config_group = parser.add_argument_group("Configuration")
    check_group = parser.add_argument_group("Check")
    output_group = parser.add_argument_group("Output")
    logging_group = parser.add_argument_group("Logging")
    misc_group = parser.add_argument_group("Misc")

    config_group.add_argument(
        "--config",
        metavar="PATH",
        help="Check configuration file (JSON or YAML; '-' reads stdin)",
    )
    check_group.add_argument(
        "--server",
        help="DNS server to query (IP or hostname); overrides the configuration",
    )
    check_group.add_argument(
        "--port",
        type=int,
        default=None,
        help="DNS server port (default 53); overrides the configuration",
    )
    check_group.add_argument(
        "--record",
        choices=SUPPORTED_RECORD_TYPES,
        default=None,
        help="Record type to query (default A); overrides the configuration",
    )
    check_group.add_argument(
        "--domain",
        help="Name to resolve, or IP address for PTR; overrides the configuration",
    )
    check_group.add_argument(
        "--expected-output",
        dest="expected_output",
        help="Value that must appear among the results; overrides the configuration",
    )
    check_group.add_argument(
        "--timeout",
        type=functools.partial(_parse_positive_float, label="Timeout"),
        default=DEFAULT_TIMEOUT,
        help="Deadline for the whole check in seconds",
    )
    output_group.add_argument(
        "--output",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    logging_group.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (use -vv for debug)",
    )
    misc_group.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show version and exit",
    )
    return parser
