"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from dns_probe.models import RecordCheck


@pytest.fixture
def cli_module():
    """Load the CLI module under test.

    Returns:
        module: Imported ``dns_probe.cli`` module.
    """
    import dns_probe.cli as cli

    return cli


@pytest.fixture
def patch_cli_datetime(
    monkeypatch: pytest.MonkeyPatch,
    cli_module: Any,
) -> Callable[[datetime], None]:
    """Patch CLI time generation with a fixed datetime.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        cli_module (Any): Imported CLI module.

    Returns:
        Callable[[datetime], None]: Patch function that sets ``datetime.now``.
    """

    def _patch(now: datetime) -> None:
        fixed = now if now.tzinfo is not None else now.replace(tzinfo=timezone.utc)

        class _FixedDateTime:
            @staticmethod
            def now(tz=None):
                return fixed

        monkeypatch.setattr(cli_module, "datetime", _FixedDateTime)

    return _patch


@pytest.fixture
def patch_check(
    monkeypatch: pytest.MonkeyPatch,
    cli_module: Any,
) -> Callable[[RecordCheck], list]:
    """Patch the probe check to return a prebuilt result.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        cli_module (Any): Imported CLI module.

    Returns:
        Callable[[RecordCheck], list]: Patch function returning the recorded calls.
    """

    def _patch(result: RecordCheck) -> list:
        calls = []

        def _check(config, context):
            calls.append((config, context))
            return result

        monkeypatch.setattr(cli_module, "check", _check)
        return calls

    return _patch
