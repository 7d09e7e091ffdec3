"""Output helpers for presenting probe results."""

from __future__ import annotations

import json
from importlib import resources

from jinja2.sandbox import SandboxedEnvironment

from .models import RecordCheck

_TEMPLATE_PACKAGE = "dns_probe.resources.templates"
_TEXT_TEMPLATE = "text.j2"

_ENV = SandboxedEnvironment(autoescape=False, trim_blocks=True, lstrip_blocks=True)


def _render_template(template_name: str, context: dict) -> str:
    """Render a packaged template with the provided context.

    Args:
        template_name (str): Template filename to render.
        context (dict): Render context.

    Returns:
        str: Rendered template output.
    """
    source = resources.files(_TEMPLATE_PACKAGE).joinpath(template_name).read_text(encoding="utf-8")
    return _ENV.from_string(source).render(**context)


def build_json_payload(result: RecordCheck, report_time: str) -> dict:
    """Build a JSON-serializable payload for a result.

    Args:
        result (RecordCheck): Probe result.
        report_time (str): UTC report timestamp string.

    Returns:
        dict: JSON-serializable payload.
    """
    return {
        "report_time_utc": report_time,
        "record_type": result.record_type,
        "status": result.status.value,
        "message": result.message,
        "details": result.details,
    }


def to_json(result: RecordCheck, report_time: str) -> str:
    """Render a result as formatted JSON.

    Args:
        result (RecordCheck): Probe result.
        report_time (str): UTC report timestamp string.

    Returns:
        str: JSON string.
    """
    return json.dumps(build_json_payload(result, report_time), indent=2)


def to_text(result: RecordCheck, report_time: str) -> str:
    """Render a result as plain text.

    Args:
        result (RecordCheck): Probe result.
        report_time (str): UTC report timestamp string.

    Returns:
        str: Text report.
    """
    details = result.details
    context = {
        "target": details.get("target", ""),
        "domain": details.get("domain", ""),
        "expected": details.get("expected", ""),
        "found": details.get("found"),
        "error": details.get("error"),
        "record_type": result.record_type,
        "status": result.status.value,
        "message": result.message,
        "report_time": report_time,
    }
    return _render_template(_TEXT_TEMPLATE, context).rstrip("\n")


__all__ = ["build_json_payload", "to_json", "to_text"]
