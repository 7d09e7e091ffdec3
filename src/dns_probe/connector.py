"""Name server that pins every resolver query to one endpoint.

dnspython resolvers accept ``dns.nameserver.Nameserver`` instances in place of
address strings. ``FixedServerConnector`` is installed as the only entry, so
the resolver's message handling (answer validation, TCP retry on truncation)
is reused while every connection goes to the configured ``server:port`` and is
bounded by the check context.
"""

from __future__ import annotations

import logging
import socket
import time
from typing import Optional

import dns.exception
import dns.inet
import dns.message
import dns.nameserver
import dns.query

from .context import CheckContext

LOGGER = logging.getLogger(__name__)

# Upper bound on a single blocking wait, so cancellation is noticed promptly.
_POLL_INTERVAL = 0.1


class FixedServerConnector(dns.nameserver.Nameserver):
    """Send resolver queries to a fixed address within a context deadline.

    Attributes:
        address (str): IP address of the DNS server.
        port (int): DNS server port.
    """

    def __init__(self, address: str, port: int, context: CheckContext) -> None:
        """Initialize the connector.

        Args:
            address (str): IP address of the DNS server.
            port (int): DNS server port.
            context (CheckContext): Context bounding every query.

        Raises:
            ValueError: If the address is not an IP literal.
        """
        super().__init__()
        if not dns.inet.is_address(address):
            raise ValueError(f"DNS server address must be an IP address: {address}")
        self.address = address
        self.port = port
        self._context = context

    def __str__(self) -> str:
        """Return the endpoint in dnspython's ``address@port`` notation."""
        return f"{self.address}@{self.port}"

    def kind(self) -> str:
        """Return the transport kind label."""
        return "Do53"

    def is_always_max_size(self) -> bool:
        """Return False; UDP is tried first and TCP only after truncation."""
        return False

    def answer_nameserver(self) -> str:
        """Return the address recorded on resolver answers."""
        return self.address

    def answer_port(self) -> int:
        """Return the port recorded on resolver answers."""
        return self.port

    def _check_context(self) -> None:
        """Refuse to start or continue a query once the context is done.

        Raises:
            ConnectionAbortedError: If the context is cancelled or expired.
        """
        error = self._context.err()
        if error is not None:
            # OSError subclasses make the resolver drop this server and stop.
            raise ConnectionAbortedError(str(error))

    def _bounded_timeout(self, timeout: Optional[float]) -> float:
        """Clip a resolver timeout to the time left on the context.

        Args:
            timeout (Optional[float]): Timeout proposed by the resolver.

        Returns:
            float: Timeout no longer than the remaining context budget.
        """
        remaining = self._context.remaining()
        if timeout is None:
            return remaining
        return min(timeout, remaining)

    def query(
        self,
        request: dns.message.QueryMessage,
        timeout: float,
        source: Optional[str],
        source_port: int,
        max_size: bool = False,
        one_rr_per_rrset: bool = False,
        ignore_trailing: bool = False,
    ) -> dns.message.Message:
        """Send one query to the fixed endpoint.

        Args:
            request (dns.message.QueryMessage): Query built by the resolver.
            timeout (float): Per-attempt timeout proposed by the resolver.
            source (Optional[str]): Optional local source address.
            source_port (int): Local source port (0 for any).
            max_size (bool): Use TCP, requested after a truncated UDP reply.
            one_rr_per_rrset (bool): Put each RR into its own RRset.
            ignore_trailing (bool): Ignore trailing junk in responses.

        Returns:
            dns.message.Message: Response message.

        Raises:
            ConnectionAbortedError: If the context is cancelled or expired.
            dns.exception.Timeout: If no response arrives in time.
            dns.message.Truncated: If a UDP reply was truncated.
        """
        self._check_context()
        timeout = self._bounded_timeout(timeout)
        if max_size:
            LOGGER.debug("Querying %s over TCP (timeout %.3fs)", self, timeout)
            return dns.query.tcp(
                request,
                self.address,
                timeout=timeout,
                port=self.port,
                source=source,
                source_port=source_port,
                one_rr_per_rrset=one_rr_per_rrset,
                ignore_trailing=ignore_trailing,
            )
        LOGGER.debug("Querying %s over UDP (timeout %.3fs)", self, timeout)
        return self._query_udp(
            request,
            timeout,
            source,
            source_port,
            one_rr_per_rrset=one_rr_per_rrset,
            ignore_trailing=ignore_trailing,
        )

    def _query_udp(
        self,
        request: dns.message.QueryMessage,
        timeout: float,
        source: Optional[str],
        source_port: int,
        *,
        one_rr_per_rrset: bool,
        ignore_trailing: bool,
    ) -> dns.message.Message:
        """Send a UDP query and wait for the reply in cancellable slices.

        Args:
            request (dns.message.QueryMessage): Query to send.
            timeout (float): Time budget for this attempt.
            source (Optional[str]): Optional local source address.
            source_port (int): Local source port.
            one_rr_per_rrset (bool): Put each RR into its own RRset.
            ignore_trailing (bool): Ignore trailing junk in responses.

        Returns:
            dns.message.Message: Response message.

        Raises:
            ConnectionAbortedError: If the context is cancelled while waiting.
            dns.exception.Timeout: If no response arrives in time.
            dns.query.BadResponse: If the reply does not answer the query.
        """
        af = dns.inet.af_for_address(self.address)
        destination = dns.inet.low_level_address_tuple((self.address, self.port), af)
        expiration = time.time() + timeout
        with socket.socket(af, socket.SOCK_DGRAM) as sock:
            sock.setblocking(False)
            if source is not None:
                sock.bind(dns.inet.low_level_address_tuple((source, source_port), af))
            dns.query.send_udp(sock, request, destination, expiration)
            while True:
                self._check_context()
                slice_expiration = min(expiration, time.time() + _POLL_INTERVAL)
                try:
                    response, _received_time = dns.query.receive_udp(
                        sock,
                        destination,
                        expiration=slice_expiration,
                        ignore_unexpected=True,
                        one_rr_per_rrset=one_rr_per_rrset,
                        keyring=request.keyring,
                        request_mac=request.mac,
                        ignore_trailing=ignore_trailing,
                        raise_on_truncation=True,
                    )
                except dns.exception.Timeout:
                    if time.time() >= expiration:
                        raise
                    continue
                if not request.is_response(response):
                    raise dns.query.BadResponse
                return response


__all__ = ["FixedServerConnector"]
