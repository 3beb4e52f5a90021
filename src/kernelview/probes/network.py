"""Network identity and listening socket probes."""

import socket

import psutil

from kernelview.heuristics import WILDCARD_ADDRESSES

# Maximum number of ports shown before truncating.
MAX_PORTS = 5

LOOPBACK = "127.0.0.1"


def _routed_address() -> str:
    # Connecting a UDP socket only selects a route; nothing is sent.
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.connect(("8.8.8.8", 53))
        return sock.getsockname()[0]


def _interface_address() -> str | None:
    for addresses in psutil.net_if_addrs().values():
        for addr in addresses:
            if addr.family == socket.AF_INET and not addr.address.startswith("127."):
                return addr.address
    return None


def ip_address() -> str:
    """Primary IPv4 address: the default route's source, else any interface."""
    try:
        return _routed_address()
    except OSError:
        pass
    return _interface_address() or LOOPBACK


def format_ports(ports: list[int], limit: int = MAX_PORTS) -> str:
    """Join sorted ports, truncating with '...' past ``limit``."""
    if not ports:
        return "None"
    shown = ", ".join(str(port) for port in ports[:limit])
    return f"{shown}..." if len(ports) > limit else shown


def open_ports() -> str:
    """
    TCP ports listening on every interface.

    Sockets bound to a specific address are skipped. Ports are deduplicated
    across IPv4 and IPv6, sorted ascending and truncated to ``MAX_PORTS``.
    """
    ports = {
        conn.laddr.port
        for conn in psutil.net_connections(kind="tcp")
        if conn.status == psutil.CONN_LISTEN
        and conn.laddr
        and conn.laddr.ip in WILDCARD_ADDRESSES
    }
    return format_ports(sorted(ports))
