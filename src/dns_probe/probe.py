"""Probe executor: one lookup against one server, one membership test."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Union

from .config import CheckConfig, load_check_config
from .context import CheckContext
from .dns_resolver import DnsResolver
from .errors import DeadlineMissingError, MatchFailureError, ResolutionError
from .models import RecordCheck
from .record_registry import lookup_for, lookup_spec

LOGGER = logging.getLogger("dns_probe.probe")

ResolverFactory = Callable[[str, int, CheckContext], object]


def execute(
    config: CheckConfig,
    context: CheckContext,
    *,
    resolver_factory: Optional[ResolverFactory] = None,
) -> None:
    """Query the configured server and require the expected value in the answer.

    Args:
        config (CheckConfig): Validated check configuration.
        context (CheckContext): Context carrying the deadline; required.
        resolver_factory (Optional[ResolverFactory]): Builds the resolver from
            ``(server, port, context)``; defaults to DnsResolver.

    Raises:
        DeadlineMissingError: If the context has no deadline.
        UnsupportedRecordError: If the record type has no lookup.
        ResolutionError: If the lookup fails.
        MatchFailureError: If the expected value is not among the results.
    """
    if context.deadline is None:
        raise DeadlineMissingError()
    spec = lookup_spec(config.record_type)
    factory = resolver_factory or DnsResolver
    resolver = factory(config.server, config.port, context)

    LOGGER.debug(
        "Looking up %s %s via %s", spec.record_type.value, config.domain, config.target
    )
    found: List[str] = lookup_for(resolver, spec.record_type)(config.domain)
    LOGGER.debug("%s %s answered: %s", spec.record_type.value, config.domain, found)

    if config.expected_output in found:
        return
    raise MatchFailureError(config.expected_output, found)


def run(context: CheckContext, config_blob: Union[str, bytes, Mapping]) -> None:
    """Plugin entry point: parse a serialized configuration and execute it.

    Args:
        context (CheckContext): Context carrying the deadline.
        config_blob (Union[str, bytes, Mapping]): JSON/YAML text or decoded mapping.

    Raises:
        ConfigError: If the configuration is invalid or the deadline is missing.
        ResolutionError: If the lookup fails.
        MatchFailureError: If the expected value is not among the results.
    """
    execute(load_check_config(config_blob), context)


def _details(config: CheckConfig) -> Dict[str, object]:
    """Build the detail mapping shared by every outcome.

    Args:
        config (CheckConfig): Check configuration.

    Returns:
        Dict[str, object]: Target, domain, and expected value.
    """
    return {
        "target": config.target,
        "domain": config.domain,
        "expected": config.expected_output,
    }


def check(
    config: CheckConfig,
    context: CheckContext,
    *,
    resolver_factory: Optional[ResolverFactory] = None,
) -> RecordCheck:
    """Execute a check and report the outcome as a RecordCheck.

    Configuration errors, including a missing deadline, are not outcomes of
    the check and propagate.

    Args:
        config (CheckConfig): Validated check configuration.
        context (CheckContext): Context carrying the deadline.
        resolver_factory (Optional[ResolverFactory]): Optional resolver factory.

    Returns:
        RecordCheck: PASS when found, FAIL when absent, UNKNOWN when the lookup failed.
    """
    record_type = lookup_spec(config.record_type).record_type.value
    details = _details(config)
    try:
        execute(config, context, resolver_factory=resolver_factory)
    except MatchFailureError as err:
        details["found"] = list(err.actual)
        return RecordCheck.fail(record_type, str(err), details)
    except ResolutionError as err:
        details["error"] = str(err.error)
        return RecordCheck.unknown(record_type, str(err), details)
    return RecordCheck.pass_(record_type, "Expected value found", details)


__all__ = ["ResolverFactory", "check", "execute", "run"]
