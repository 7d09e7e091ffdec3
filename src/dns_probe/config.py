"""Check configuration model, loading, and validation."""

from __future__ import annotations

import dataclasses
import ipaddress
import json
import logging
from enum import Enum
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Dict, List, Mapping, Union

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .errors import ConfigError

LOGGER = logging.getLogger(__name__)

_SCHEMA_PACKAGE = "dns_probe.resources"
_SCHEMA_FILENAME = "check.schema.json"

DEFAULT_PORT = 53

# Key used by older plugin configurations for the server address.
_LEGACY_SERVER_KEY = "target"


class RecordType(str, Enum):
    """DNS record types a check can query."""

    A = "A"
    AAAA = "AAAA"
    CNAME = "CNAME"
    MX = "MX"
    NS = "NS"
    PTR = "PTR"
    TXT = "TXT"


DEFAULT_RECORD_TYPE = RecordType.A


@dataclasses.dataclass(frozen=True)
class CheckConfig:
    """Validated configuration for one probe run.

    Attributes:
        server (str): Hostname or IP address of the DNS server to query.
        domain (str): Name to resolve, or address to reverse-resolve for PTR.
        expected_output (str): Value that must appear among the results.
        port (int): DNS server port.
        record_type (RecordType): Record type to query.
    """

    server: str
    domain: str
    expected_output: str
    port: int = DEFAULT_PORT
    record_type: RecordType = DEFAULT_RECORD_TYPE

    @property
    def target(self) -> str:
        """Return the ``server:port`` address the check talks to."""
        host = self.server
        if ":" in host:
            host = f"[{host}]"
        return f"{host}:{self.port}"


@lru_cache(maxsize=1)
def _load_schema_validator() -> Draft202012Validator:
    """Load and cache the check configuration JSON Schema validator.

    Returns:
        Draft202012Validator: Validator for check configuration payloads.
    """
    schema_text = (
        resources.files(_SCHEMA_PACKAGE).joinpath(_SCHEMA_FILENAME).read_text(encoding="utf-8")
    )
    return Draft202012Validator(json.loads(schema_text))


def _schema_error_data(err: ValidationError) -> Dict[str, str]:
    """Render one schema validation error as a structured mapping.

    Args:
        err (ValidationError): JSON Schema validation error.

    Returns:
        Dict[str, str]: Error location and message fields.
    """
    location = ".".join(str(part) for part in err.absolute_path) or "<root>"
    return {"location": location, "message": str(err.message)}


def is_ip_address(value: str) -> bool:
    """Check whether a string is a valid IP address.

    Args:
        value (str): Input string to validate.

    Returns:
        bool: True if the value is a valid IPv4 or IPv6 address.
    """
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def collect_config_errors(payload: object) -> List[Dict[str, str]]:
    """Collect deterministic validation errors for a check payload.

    Args:
        payload (object): Decoded configuration payload.

    Returns:
        List[Dict[str, str]]: Sorted validation errors; empty when valid.
    """
    validator = _load_schema_validator()
    errors = [_schema_error_data(err) for err in validator.iter_errors(payload)]
    if not errors and isinstance(payload, Mapping) and payload.get("record") == "PTR":
        if not is_ip_address(payload["domain"].strip()):
            errors.append(
                {"location": "domain", "message": "PTR lookups require an IP address"}
            )
    return sorted(errors, key=lambda item: (item["location"], item["message"]))


def parse_config_blob(blob: Union[str, bytes]) -> object:
    """Decode a serialized configuration blob.

    JSON documents are accepted as YAML.

    Args:
        blob (Union[str, bytes]): Serialized configuration.

    Returns:
        object: Decoded payload.

    Raises:
        ConfigError: If the blob is not valid YAML/JSON.
    """
    if isinstance(blob, bytes):
        blob = blob.decode("utf-8")
    try:
        return yaml.safe_load(blob)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Configuration is not valid YAML or JSON: {exc}") from exc


def _normalize_keys(payload: Mapping) -> Dict[str, object]:
    """Map legacy keys onto their current names.

    Args:
        payload (Mapping): Decoded configuration mapping.

    Returns:
        Dict[str, object]: Copy of the payload using current key names.
    """
    data = dict(payload)
    if _LEGACY_SERVER_KEY in data and "server" not in data:
        data["server"] = data.pop(_LEGACY_SERVER_KEY)
    return data


def load_check_config(data: Union[str, bytes, Mapping]) -> CheckConfig:
    """Validate a configuration payload and build a CheckConfig.

    Args:
        data (Union[str, bytes, Mapping]): Serialized blob or decoded mapping.

    Returns:
        CheckConfig: Validated configuration.

    Raises:
        ConfigError: If the payload is malformed or fails validation.
    """
    payload = parse_config_blob(data) if isinstance(data, (str, bytes)) else data
    if not isinstance(payload, Mapping):
        raise ConfigError(
            "Configuration must be a mapping",
            [{"location": "<root>", "message": "expected a mapping"}],
        )
    payload = _normalize_keys(payload)

    errors = collect_config_errors(payload)
    if errors:
        rendered = "; ".join(f"{item['location']}: {item['message']}" for item in errors)
        raise ConfigError(f"Invalid check configuration: {rendered}", errors)

    config = CheckConfig(
        server=payload["server"].strip(),
        domain=payload["domain"].strip(),
        expected_output=payload["expected_output"],
        port=int(payload.get("port", DEFAULT_PORT)),
        record_type=RecordType(payload.get("record", DEFAULT_RECORD_TYPE.value)),
    )
    LOGGER.debug("Loaded check configuration: %s", config)
    return config


def load_check_config_file(path: Union[str, Path]) -> CheckConfig:
    """Load and validate a configuration file.

    Args:
        path (Union[str, Path]): Path to a YAML or JSON file.

    Returns:
        CheckConfig: Validated configuration.

    Raises:
        ConfigError: If the file cannot be read or fails validation.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration {config_path}: {exc}") from exc
    return load_check_config(text)


__all__ = [
    "CheckConfig",
    "DEFAULT_PORT",
    "DEFAULT_RECORD_TYPE",
    "RecordType",
    "collect_config_errors",
    "is_ip_address",
    "load_check_config",
    "load_check_config_file",
    "parse_config_blob",
]
