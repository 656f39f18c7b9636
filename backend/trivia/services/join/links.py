import logging
import socket
from typing import Optional
from urllib.parse import quote

logger = logging.getLogger(__name__)

FALLBACK_HOST = 'localhost'


def get_lan_ip() -> str:
    """Best-effort LAN address other devices on the network can reach."""
    try:
        # UDP connect sends nothing; it only selects the outbound interface
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.connect(('8.8.8.8', 80))
            ip = sock.getsockname()[0]
        finally:
            sock.close()
        if ip and not ip.startswith('127.'):
            return ip
    except OSError as exc:
        logger.warning(f"[address] route lookup failed: {exc}")
    try:
        ip = socket.gethostbyname(socket.gethostname())
        if ip and not ip.startswith('127.'):
            return ip
    except OSError as exc:
        logger.warning(f"[address] hostname lookup failed: {exc}")
    return FALLBACK_HOST


def local_base_url(ip: str, port: int) -> str:
    return f'http://{ip}:{port}'


def build_player_url(socket_base: str, player_page_url: Optional[str] = None) -> str:
    """URL a player opens to join.

    An externally hosted player page is pointed back at this server through
    ``?host=``; otherwise the server's own ``/player.html`` is used.
    """
    if player_page_url:
        sep = '&' if '?' in player_page_url else '?'
        return f"{player_page_url}{sep}host={quote(socket_base, safe='')}"
    return f"{socket_base.rstrip('/')}/player.html"


def public_base_url(config) -> Optional[str]:
    """Public relay base URL from config, or ``None`` when players must share the LAN."""
    url = (config.get('PUBLIC_BASE_URL') or '').strip()
    return url.rstrip('/') or None
