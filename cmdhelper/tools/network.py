"""Network probes: TCP port check, DNS lookup and the system ping command."""

import socket

import structlog

from ..errors import NetworkError

log = structlog.get_logger(__name__)

PORT_TIMEOUT = 3.0


def _resolve(host: str, port: int) -> list[tuple]:
    try:
        return socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as e:
        raise NetworkError(f"Failed to resolve address {host}: {e}") from e


def check_port(host: str, port: int, timeout: float = PORT_TIMEOUT) -> bool:
    """
    True if a TCP connection to host:port succeeds within timeout.

    Only the first resolved address is tried. An unresolvable host raises
    NetworkError; a refused or timed-out connection is simply False.
    """
    family, kind, proto, _, address = _resolve(host, port)[0]
    try:
        with socket.socket(family, kind, proto) as s:
            s.settimeout(timeout)
            s.connect(address)
    except OSError as e:
        log.info("port closed", host=host, port=port, error=str(e))
        return False
    log.info("port open", host=host, port=port)
    return True


def dns_lookup(hostname: str) -> list[str]:
    """IP addresses for hostname, in resolver order, without duplicates."""
    addresses: list[str] = []
    for *_, sockaddr in _resolve(hostname, 80):
        ip = sockaddr[0]
        if ip not in addresses:
            addresses.append(ip)
    log.info("dns lookup", hostname=hostname, count=len(addresses))
    return addresses


def ping_command(host: str, os_name: str, count: int = 4) -> list[str]:
    """argv for the platform ping tool."""
    flag = "-n" if os_name == "windows" else "-c"
    return ["ping", flag, str(count), host]
