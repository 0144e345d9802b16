"""
SSDP discovery of the AiSEG2 gateway.

Sends one ``M-SEARCH`` for the gateway's data-service type and returns the
source address of the first matching response.
"""

import socket
import time

from .config import (
    DISCOVERY_TIMEOUT,
    SERVICE_TYPE,
    SSDP_ADDRESS,
    SSDP_MX,
    SSDP_PORT,
    SSDP_TTL,
)
from .errors import DiscoveryTimeout
from .logging_setup import log


def build_msearch(service_type: str, mx: int = SSDP_MX) -> bytes:
    """Build the SSDP ``M-SEARCH`` request for *service_type*."""
    lines = [
        "M-SEARCH * HTTP/1.1",
        f"HOST: {SSDP_ADDRESS}:{SSDP_PORT}",
        'MAN: "ssdp:discover"',
        f"MX: {mx}",
        f"ST: {service_type}",
        "",
        "",
    ]
    return "\r\n".join(lines).encode("ascii")


def parse_ssdp_headers(data: bytes) -> dict[str, str]:
    """Parse an SSDP response into a dict with upper-cased header names."""
    headers: dict[str, str] = {}
    text = data.decode("utf-8", errors="replace")
    for line in text.split("\r\n")[1:]:
        if ":" not in line:
            continue
        name, _, value = line.partition(":")
        headers[name.strip().upper()] = value.strip()
    return headers


class SSDPClient:
    """One ephemeral UDP socket used for a single multicast search."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = socket.socket(
            socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP
        )
        self._sock.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_TTL, SSDP_TTL)

    def search(self, service_type: str) -> None:
        self._sock.sendto(build_msearch(service_type), (SSDP_ADDRESS, SSDP_PORT))
        log.debug("M-SEARCH sent for %s", service_type)

    def receive(self, timeout: float) -> tuple[bytes, tuple[str, int]]:
        """Wait up to *timeout* seconds for one datagram; raises socket.timeout."""
        self._sock.settimeout(timeout)
        return self._sock.recvfrom(65507)

    def stop(self) -> None:
        if self._sock is None:
            return
        self._sock.close()
        self._sock = None


def discover(timeout: float = DISCOVERY_TIMEOUT, client_factory=SSDPClient) -> str:
    """
    Return the IP address of the first AiSEG2 gateway that answers.

    Responses advertising a different ``ST`` are ignored.  Raises
    ``DiscoveryTimeout`` when nothing matches within *timeout* seconds.
    The discovery socket is stopped on every exit path.
    """
    try:
        client = client_factory()
    except OSError as exc:
        raise DiscoveryTimeout("Can't find AiSEG2") from exc
    try:
        try:
            client.search(SERVICE_TYPE)
        except OSError as exc:
            raise DiscoveryTimeout("Can't find AiSEG2") from exc

        deadline = time.monotonic() + timeout
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise DiscoveryTimeout("Can't find AiSEG2")
            try:
                data, (address, _port) = client.receive(remaining)
            except OSError as exc:  # socket.timeout included
                raise DiscoveryTimeout("Can't find AiSEG2") from exc

            st = parse_ssdp_headers(data).get("ST")
            if st is not None and st != SERVICE_TYPE:
                log.debug("Ignoring SSDP response from %s (ST=%s)", address, st)
                continue
            log.info("AiSEG2 found at %s", address)
            return address
    finally:
        client.stop()
