"""DNS resolver wrapper bound to one server and one check context.

The resolver is intentionally thin so it can be replaced in tests.
"""

from __future__ import annotations

import logging
from typing import List

try:
    import dns.exception
    import dns.resolver
    import dns.reversename
except ImportError as exc:  # pragma: no cover - handled at runtime
    raise SystemExit("dnspython is required. Install with `pip install dnspython`.") from exc

from .config import is_ip_address
from .connector import FixedServerConnector
from .context import CheckContext
from .errors import ResolutionError

LOGGER = logging.getLogger(__name__)


class DnsResolver:
    """Perform DNS lookups against a single server using dnspython.

    Every lookup returns plain strings exactly as dnspython renders the
    answer data; absolute names keep their trailing dot.

    Attributes:
        server (str): Configured server hostname or IP address.
        port (int): DNS server port.
        address (str): IP address queries are sent to.
    """

    def __init__(self, server: str, port: int, context: CheckContext) -> None:
        """Initialize the resolver.

        Args:
            server (str): DNS server hostname or IP address.
            port (int): DNS server port.
            context (CheckContext): Context carrying the deadline.

        Raises:
            DeadlineMissingError: If the context has no deadline.
            ResolutionError: If a server hostname cannot be resolved.
        """
        self.server = server
        self.port = port
        self._context = context
        # Fails fast when the context carries no deadline.
        self._context.remaining()
        self.address = self._resolve_server_address(server)
        self._resolver = dns.resolver.Resolver(configure=False)
        self._resolver.nameservers = [FixedServerConnector(self.address, port, context)]

    def _resolve_server_address(self, server: str) -> str:
        """Resolve a server hostname into an IP address.

        The hostname is looked up with the system resolver configuration,
        IPv4 first.

        Args:
            server (str): Server hostname or IP address.

        Returns:
            str: IP address to send queries to.

        Raises:
            ResolutionError: If the hostname does not resolve.
        """
        if is_ip_address(server):
            return server
        try:
            system_resolver = dns.resolver.Resolver()
        except dns.exception.DNSException as err:
            raise self._lookup_error("A", server, err) from err
        for record_type in ("A", "AAAA"):
            try:
                answers = system_resolver.resolve(
                    server, record_type, lifetime=self._context.remaining()
                )
            except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
                continue
            except dns.exception.DNSException as err:
                raise self._lookup_error(record_type, server, err) from err
            for rdata in answers:
                address = str(rdata.address)
                LOGGER.debug("Resolved DNS server %s to %s", server, address)
                return address
        raise ResolutionError(
            "A", server, ValueError(f"DNS server '{server}' did not resolve to any IP addresses")
        )

    def _lookup_error(self, record_type: str, name: str, err: Exception) -> ResolutionError:
        """Build a resolution error, preferring the context error when done.

        Args:
            record_type (str): DNS record type being queried.
            name (str): DNS name being queried.
            err (Exception): Error raised by dnspython.

        Returns:
            ResolutionError: Error to raise.
        """
        LOGGER.warning("%s lookup failed for %s: %s", record_type, name, err)
        context_error = self._context.err()
        if context_error is not None:
            return ResolutionError(record_type, name, context_error)
        return ResolutionError(record_type, name, err)

    def _resolve(self, name: str, record_type: str, **kwargs):
        """Run one query through the pinned name server.

        Args:
            name (str): DNS name to query.
            record_type (str): DNS record type.
            **kwargs: Extra ``dns.resolver.Resolver.resolve`` arguments.

        Returns:
            dns.resolver.Answer: Lookup answer.

        Raises:
            ResolutionError: If the query fails, is cancelled, or times out.
        """
        context_error = self._context.err()
        if context_error is not None:
            raise ResolutionError(record_type, name, context_error)
        remaining = self._context.remaining()
        self._resolver.timeout = remaining
        LOGGER.debug("Querying %s for %s %s", self.address, record_type, name)
        try:
            answers = self._resolver.resolve(
                name, record_type, lifetime=remaining, search=False, **kwargs
            )
        except dns.exception.DNSException as err:
            raise self._lookup_error(record_type, name, err) from err
        return answers

    def get_a(self, name: str) -> List[str]:
        """Resolve A records for a DNS name.

        Args:
            name (str): DNS name to query.

        Returns:
            List[str]: IPv4 address strings.

        Raises:
            ResolutionError: If a DNS error occurs during lookup.
        """
        return [str(rdata.address) for rdata in self._resolve(name, "A")]

    def get_aaaa(self, name: str) -> List[str]:
        """Resolve AAAA records for a DNS name.

        Args:
            name (str): DNS name to query.

        Returns:
            List[str]: IPv6 address strings.

        Raises:
            ResolutionError: If a DNS error occurs during lookup.
        """
        return [str(rdata.address) for rdata in self._resolve(name, "AAAA")]

    def get_cname(self, name: str) -> List[str]:
        """Resolve the canonical name for a DNS name.

        The CNAME chain in the answer is followed to its end; a name without
        aliases is its own canonical name.

        Args:
            name (str): DNS name to query.

        Returns:
            List[str]: Single-element list holding the canonical name.

        Raises:
            ResolutionError: If a DNS error occurs during lookup.
        """
        answers = self._resolve(name, "A", raise_on_no_answer=False)
        return [str(answers.canonical_name)]

    def get_mx(self, domain: str) -> List[str]:
        """Resolve MX exchange hosts for a domain.

        Args:
            domain (str): Domain name to query.

        Returns:
            List[str]: Exchange hostnames in answer order, preference dropped.

        Raises:
            ResolutionError: If a DNS error occurs during lookup.
        """
        return [str(rdata.exchange) for rdata in self._resolve(domain, "MX")]

    def get_ns(self, domain: str) -> List[str]:
        """Resolve NS records for a domain.

        Args:
            domain (str): Domain name to query.

        Returns:
            List[str]: Name server hostnames.

        Raises:
            ResolutionError: If a DNS error occurs during lookup.
        """
        return [str(rdata.target) for rdata in self._resolve(domain, "NS")]

    def get_ptr(self, address: str) -> List[str]:
        """Reverse-resolve an IP address.

        Args:
            address (str): IPv4 or IPv6 address.

        Returns:
            List[str]: PTR target hostnames.

        Raises:
            ResolutionError: If the address is invalid or the lookup fails.
        """
        try:
            name = dns.reversename.from_address(address)
        except (dns.exception.SyntaxError, ValueError) as err:
            raise ResolutionError("PTR", address, err) from err
        return [str(rdata.target) for rdata in self._resolve(str(name), "PTR")]

    def get_txt(self, domain: str) -> List[str]:
        """Resolve TXT records for a domain.

        Bytes that are not valid UTF-8 are kept as ``\\xNN`` escapes.

        Args:
            domain (str): Domain name to query.

        Returns:
            List[str]: TXT record strings, one per record.

        Raises:
            ResolutionError: If a DNS error occurs during lookup.
        """
        records: List[str] = []
        for rdata in self._resolve(domain, "TXT"):
            record = "".join(
                part.decode("utf-8", errors="backslashreplace") for part in rdata.strings
            )
            records.append(record)
        return records


__all__ = ["DnsResolver"]
