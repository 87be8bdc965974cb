"""
Machine IP Discovery

Best-effort discovery of this cell's outward-facing address.
"""

import socket

from installgen.constants import DISCOVERY_PROBE_PORT
from installgen.exceptions import NetworkDiscoveryError


def discover_machine_ip(target_host: str, port: int = DISCOVERY_PROBE_PORT) -> str:
    """
    Address of the local interface that routes towards `target_host`.

    Connecting a UDP socket sends no packet; it only asks the routing table
    which local address would be used. This is a heuristic: on multi-homed
    hosts or behind NAT it may not be the address other cells should use, in
    which case pass --machine-ip explicitly.

    Args:
        target_host: Host to route towards (the first consul server)
        port: Any port; nothing listens on it

    Returns:
        Local IP address as a string

    Raises:
        NetworkDiscoveryError: If the host cannot be resolved or routed to
    """
    try:
        family, socktype, proto, _, address = socket.getaddrinfo(
            target_host, port, type=socket.SOCK_DGRAM
        )[0]
        with socket.socket(family, socktype, proto) as sock:
            sock.connect(address)
            return sock.getsockname()[0]
    except OSError as e:
        raise NetworkDiscoveryError(
            f"Could not determine machine IP from route to {target_host}",
            context=f"{e}. Pass --machine-ip explicitly",
        )
