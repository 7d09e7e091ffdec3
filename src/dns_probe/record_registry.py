"""Record type registry mapping each record type to its lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Union

from .config import RecordType
from .errors import UnsupportedRecordError


@dataclass(frozen=True)
class RecordTypeSpec:
    """Describe how a record type is looked up.

    Attributes:
        record_type (RecordType): Record type label (e.g., A, MX).
        lookup_method (str): DnsResolver method name returning result strings.
        description (str): What the result strings hold.
    """

    record_type: RecordType
    lookup_method: str
    description: str


RECORD_TYPE_SPECS: tuple[RecordTypeSpec, ...] = (
    RecordTypeSpec(RecordType.A, "get_a", "IPv4 addresses"),
    RecordTypeSpec(RecordType.AAAA, "get_aaaa", "IPv6 addresses"),
    RecordTypeSpec(RecordType.CNAME, "get_cname", "canonical name"),
    RecordTypeSpec(RecordType.MX, "get_mx", "mail exchange hosts"),
    RecordTypeSpec(RecordType.NS, "get_ns", "name server hosts"),
    RecordTypeSpec(RecordType.PTR, "get_ptr", "reverse lookup names"),
    RecordTypeSpec(RecordType.TXT, "get_txt", "text values"),
)

_SPECS_BY_TYPE: Dict[RecordType, RecordTypeSpec] = {
    spec.record_type: spec for spec in RECORD_TYPE_SPECS
}

SUPPORTED_RECORD_TYPES: List[str] = [spec.record_type.value for spec in RECORD_TYPE_SPECS]


def lookup_spec(record_type: Union[RecordType, str]) -> RecordTypeSpec:
    """Return the registry entry for a record type.

    Args:
        record_type (Union[RecordType, str]): Record type enum member or label.

    Returns:
        RecordTypeSpec: Matching registry entry.

    Raises:
        UnsupportedRecordError: If the record type has no entry.
    """
    try:
        normalized = RecordType(record_type)
    except ValueError as exc:
        raise UnsupportedRecordError(record_type) from exc
    spec = _SPECS_BY_TYPE.get(normalized)
    if spec is None:
        raise UnsupportedRecordError(record_type)
    return spec


def lookup_for(resolver: object, record_type: Union[RecordType, str]) -> Callable[[str], List[str]]:
    """Return the bound resolver lookup for a record type.

    Args:
        resolver (object): Resolver exposing ``get_*`` lookup methods.
        record_type (Union[RecordType, str]): Record type enum member or label.

    Returns:
        Callable[[str], List[str]]: Lookup taking the query name.

    Raises:
        UnsupportedRecordError: If the record type has no entry.
    """
    return getattr(resolver, lookup_spec(record_type).lookup_method)


__all__ = [
    "RECORD_TYPE_SPECS",
    "RecordTypeSpec",
    "SUPPORTED_RECORD_TYPES",
    "lookup_for",
    "lookup_spec",
]
