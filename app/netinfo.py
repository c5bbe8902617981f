"""
LAN address discovery for the startup banner.
"""
import logging
import socket

logger = logging.getLogger(__name__)


def get_lan_ip() -> str:
    """First non‑loopback IPv4 address of this host, else ``"localhost"``."""
    try:
        infos = socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
    except OSError as e:
        logger.debug("Host lookup failed: %s", e)
        infos = []
    for info in infos:
        addr = info[4][0]
        if not addr.startswith("127."):
            return addr

    # UDP "connect" sends nothing; it only selects the outbound interface
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.connect(("10.255.255.255", 1))
            addr = s.getsockname()[0]
    except OSError as e:
        logger.debug("Route lookup failed: %s", e)
        return "localhost"
    return addr if not addr.startswith("127.") and addr != "0.0.0.0" else "localhost"
