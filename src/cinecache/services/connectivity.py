"""Connectivity probe.

Answers whether outbound internet access is usable right now. Two
independent conditions must hold:

1. an active network interface exists (up, not loopback, with an address)
2. that interface actually reaches the internet, validated by a short
   TCP connect to a well-known host

Nothing is cached between calls; every check is a fresh probe.
"""

from __future__ import annotations

import logging
import socket

import psutil

from cinecache.shared.constants import ConnectivityDefaults

logger = logging.getLogger(__name__)

_ADDRESS_FAMILIES = (socket.AF_INET, socket.AF_INET6)


class ConnectivityProbe:
    """Point-in-time network reachability check.

    Args:
        host: Host used to validate internet reachability
        port: TCP port on ``host``
        timeout: Seconds to wait for the validation connect
    """

    def __init__(
        self,
        host: str = ConnectivityDefaults.PROBE_HOST,
        port: int = ConnectivityDefaults.PROBE_PORT,
        timeout: float = ConnectivityDefaults.PROBE_TIMEOUT,
    ) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout

    def is_network_usable(self) -> bool:
        """Return True only if an interface is up AND the internet is reachable."""
        if not self.has_active_interface():
            logger.debug("No active network interface")
            return False

        if not self.is_internet_reachable():
            logger.debug("Active interface present but %s:%d unreachable", self.host, self.port)
            return False

        return True

    def has_active_interface(self) -> bool:
        """Return True if a non-loopback interface is up and has an address."""
        try:
            stats = psutil.net_if_stats()
            addresses = psutil.net_if_addrs()
        except OSError as e:
            logger.warning("Failed to enumerate network interfaces: %s", e)
            return False

        for name, stat in stats.items():
            if not stat.isup:
                continue
            for addr in addresses.get(name, []):
                if addr.family in _ADDRESS_FAMILIES and not _is_loopback(addr.address):
                    return True
        return False

    def is_internet_reachable(self) -> bool:
        """Return True if a TCP connection to the probe host succeeds."""
        try:
            with socket.create_connection((self.host, self.port), timeout=self.timeout):
                return True
        except OSError:
            return False


def _is_loopback(address: str) -> bool:
    # IPv6 link-local addresses may carry a zone suffix, e.g. "fe80::1%eth0"
    host = address.split("%", 1)[0]
    return host.startswith("127.") or host == "::1"
