"""Shared DNS resolver test support."""

from __future__ import annotations

from typing import Any

import dns.resolver
import pytest

from dns_probe.context import CheckContext
from dns_probe.dns_resolver import DnsResolver


class DummyResolver:
    """Minimal dnspython-compatible resolver test double.

    Attributes:
        answers (dict[tuple[str, str], Any]): Lookup results by (name, record_type).
        calls (list[tuple[str, str, dict]]): Received queries with keyword arguments.
        nameservers (list[Any]): Assigned resolver nameservers.
        timeout (float | None): Per-query timeout.
    """

    def __init__(self, answers: dict[tuple[str, str], Any]):
        """Initialize a dummy resolver.

        Args:
            answers (dict[tuple[str, str], Any]): Lookup responses keyed by query tuple.
        """
        self.answers = answers
        self.calls: list[tuple[str, str, dict]] = []
        self.nameservers: list[Any] = []
        self.timeout: float | None = None

    def resolve(self, name: str, record_type: str, **kwargs: Any) -> Any:
        """Resolve a record using predefined answers.

        Args:
            name (str): DNS name to resolve.
            record_type (str): DNS record type.
            **kwargs (Any): Resolver keyword arguments, recorded for assertions.

        Returns:
            Any: Preconfigured answer payload.

        Raises:
            Exception: Any configured exception value for the query key.
        """
        self.calls.append((name, record_type, kwargs))
        result = self.answers[(name, record_type)]
        if callable(result):
            result = result()
        if isinstance(result, Exception):
            raise result
        return result


def make_dummy_resolver(
    monkeypatch: pytest.MonkeyPatch,
    answers: dict[tuple[str, str], Any] | None = None,
) -> DummyResolver:
    """Create and patch a dummy dnspython resolver.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        answers (dict[tuple[str, str], Any] | None): Optional preloaded lookup answers.

    Returns:
        DummyResolver: Patched dummy resolver instance.
    """
    dummy = DummyResolver(answers or {})
    monkeypatch.setattr(dns.resolver, "Resolver", lambda *_args, **_kwargs: dummy)
    return dummy


def make_dns_resolver(
    monkeypatch: pytest.MonkeyPatch,
    answers: dict[tuple[str, str], Any],
    *,
    server: str = "192.0.2.53",
    port: int = 53,
    context: CheckContext | None = None,
) -> DnsResolver:
    """Create a ``DnsResolver`` backed by a patched dummy resolver.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        answers (dict[tuple[str, str], Any]): Lookup responses by query tuple.
        server (str): Server address handed to the resolver.
        port (int): Server port.
        context (CheckContext | None): Context; defaults to a 5 second deadline.

    Returns:
        DnsResolver: Resolver under test.
    """
    make_dummy_resolver(monkeypatch, answers)
    return DnsResolver(server, port, context or CheckContext.with_timeout(5))


__all__ = ["DummyResolver", "make_dns_resolver", "make_dummy_resolver"]
