"""
PTR (reverse DNS) resolvers
"""

import ipaddress
import socket
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import Optional, Protocol

import dns.exception
import dns.resolver
import dns.reversename

from ..errors import PTRLookupError


class AddressResolver(Protocol):
    """Anything that can turn an address into hostnames"""

    def lookup_addr(self, address: str) -> list[str]:
        ...


class PTRResolver:
    """
    PTR resolver backed by dnspython.

    Queries <reversed-address>.in-addr.arpa (or ip6.arpa) for PTR records.
    Names are returned as the server sent them, i.e. absolute with a
    trailing dot.
    """

    def __init__(self, timeout: Optional[float] = None,
                 nameservers: Optional[list[str]] = None):
        self.timeout = timeout
        self.nameservers = list(nameservers or [])
        self._resolver: Optional[dns.resolver.Resolver] = None

    def _get_resolver(self) -> dns.resolver.Resolver:
        """Get or create the dnspython resolver"""
        if self._resolver is None:
            if self.nameservers:
                resolver = dns.resolver.Resolver(configure=False)
                resolver.nameservers = self.nameservers
            else:
                resolver = dns.resolver.Resolver()
            if self.timeout is not None:
                resolver.timeout = self.timeout
                resolver.lifetime = self.timeout
            self._resolver = resolver
        return self._resolver

    def lookup_addr(self, address: str) -> list[str]:
        """
        Reverse lookup of a single address.

        Args:
            address: IPv4 or IPv6 address

        Returns:
            Non-empty list of hostnames in answer order

        Raises:
            PTRLookupError: If the address is invalid or has no PTR record
        """
        try:
            rev_name = dns.reversename.from_address(address)
        except (dns.exception.SyntaxError, ValueError) as e:
            raise PTRLookupError(address, f"not an IP address ({e})") from e

        try:
            answers = self._get_resolver().resolve(rev_name, 'PTR')
        except dns.resolver.NXDOMAIN as e:
            raise PTRLookupError(address, "no such domain") from e
        except dns.resolver.NoAnswer as e:
            raise PTRLookupError(address, "no PTR record") from e
        except dns.exception.Timeout as e:
            raise PTRLookupError(address, "timed out") from e
        except dns.exception.DNSException as e:
            raise PTRLookupError(address, str(e) or type(e).__name__) from e

        names = [str(rdata) for rdata in answers]
        if not names:
            raise PTRLookupError(address, "no PTR record")
        return names


class SystemPTRResolver:
    """
    PTR resolver using the operating system (socket.gethostbyaddr).

    Lookups run in a thread pool so that a timeout can be applied.
    """

    def __init__(self, timeout: Optional[float] = None, max_workers: int = 4):
        self.timeout = timeout
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

    def _resolve_sync(self, address: str) -> list[str]:
        """Synchronous PTR lookup"""
        hostname, aliases, _ = socket.gethostbyaddr(address)
        return [hostname, *aliases]

    def lookup_addr(self, address: str) -> list[str]:
        """
        Reverse lookup of a single address.

        Raises:
            PTRLookupError: If the resolver has no name for the address
        """
        try:
            ipaddress.ip_address(address)
        except ValueError as e:
            raise PTRLookupError(address, "not an IP address") from e

        future = self._executor.submit(self._resolve_sync, address)
        try:
            return future.result(timeout=self.timeout)
        except FutureTimeout as e:
            future.cancel()
            raise PTRLookupError(address, "timed out") from e
        except (socket.herror, socket.gaierror, socket.timeout, OSError, ValueError) as e:
            raise PTRLookupError(address, str(e)) from e

    def close(self):
        """Shutdown thread pool"""
        self._executor.shutdown(wait=False)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def build_resolver(backend: str = 'dns', timeout: Optional[float] = None,
                   nameservers: Optional[list[str]] = None) -> AddressResolver:
    """
    Create a resolver by backend name.

    Args:
        backend: "dns" (dnspython) or "system" (socket)
        timeout: Per-lookup timeout in seconds, None for resolver defaults
        nameservers: Nameservers to query (dns backend only)
    """
    if backend == 'dns':
        return PTRResolver(timeout=timeout, nameservers=nameservers)
    if backend == 'system':
        return SystemPTRResolver(timeout=timeout)
    raise ValueError(f"unknown resolver backend: {backend!r}")
