"""Parsing helpers for CLI inputs."""

from __future__ import annotations

import argparse
import sys
from typing import Dict

from ..config import parse_config_blob
from ..errors import ConfigError

# CLI flag destinations and the configuration keys they override.
_FIELD_FLAGS = {
    "server": "server",
    "port": "port",
    "record": "record",
    "domain": "domain",
    "expected_output": "expected_output",
}


def _parse_positive_float(value: str, *, label: str) -> float:
    """Parse a positive float from CLI input.

    Args:
        value (str): String value to parse.
        label (str): Name used in error messages.

    Returns:
        float: Parsed positive number.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive number.
    """
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{label} must be a number") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"{label} must be a positive number")
    return parsed


def _read_config_source(source: str) -> str:
    """Read configuration text from a file path or stdin.

    Args:
        source (str): File path, or ``-`` for stdin.

    Returns:
        str: Raw configuration text.

    Raises:
        ConfigError: If the file cannot be read.
    """
    if source == "-":
        return sys.stdin.read()
    try:
        with open(source, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration {source}: {exc}") from exc


def _build_config_payload(args: object) -> Dict[str, object]:
    """Merge a configuration file with field flags.

    Args:
        args (object): Parsed CLI arguments.

    Returns:
        Dict[str, object]: Configuration payload; flags override file values.

    Raises:
        ConfigError: If the configuration file is unreadable or not a mapping.
    """
    payload: Dict[str, object] = {}
    if getattr(args, "config", None):
        decoded = parse_config_blob(_read_config_source(args.config))
        if decoded is not None and not isinstance(decoded, dict):
            raise ConfigError("Configuration file must contain a mapping")
        payload.update(decoded or {})
    for dest, key in _FIELD_FLAGS.items():
        value = getattr(args, dest, None)
        if value is not None:
            if key == "server":
                payload.pop("target", None)
            payload[key] = value
    return payload
