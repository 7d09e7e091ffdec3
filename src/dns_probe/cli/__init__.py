"""Command-line interface for the DNS probe."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import List

from ..config import load_check_config
from ..context import CheckContext
from ..errors import ConfigError
from ..output import to_json, to_text
from ..probe import check
from ..status import exit_code_for_status
from .parser import _setup_logging, build_parser
from .parsing import _build_config_payload, _parse_positive_float

LOGGER = logging.getLogger(__name__)

__all__ = [
    "_build_config_payload",
    "_parse_positive_float",
    "_setup_logging",
    "build_parser",
    "main",
]


def main(argv: List[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Args:
        argv (List[str] | None): Optional argument list for parsing.

    Returns:
        int: Exit code (0=PASS, 1=FAIL, 3=UNKNOWN); usage errors exit with 2.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)
    LOGGER.debug("Parsed arguments: %s", args)

    try:
        config = load_check_config(_build_config_payload(args))
    except ConfigError as exc:
        parser.error(str(exc))

    LOGGER.info(
        "Checking %s %s via %s (timeout %.1fs)",
        config.record_type.value,
        config.domain,
        config.target,
        args.timeout,
    )
    context = CheckContext.with_timeout(args.timeout)
    report_time = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M")

    result = check(config, context)
    LOGGER.info("%s: %s - %s", result.record_type, result.status.value, result.message)
    if args.output == "json":
        print(to_json(result, report_time))
    else:
        print(to_text(result, report_time))
    return exit_code_for_status(result.status)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
