"""
IP geolocation ("WHOIS") lookup.
"""

from __future__ import annotations

import logging
import re

import httpx

from command_center.lookups._http import get_json

logger = logging.getLogger(__name__)

API_URL = "https://geolocation-db.com/json/{ip}&position=true"

ERROR_MESSAGE = "An error occurred while looking up the IP address."

_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
_IPV4_RE = re.compile(rf"^{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}$")


def is_valid_ipv4(ip: str) -> bool:
    """Check for a dotted-quad IPv4 address.

    Example:
        >>> is_valid_ipv4("8.8.8.8")
        True
        >>> is_valid_ipv4("256.1.1.1")
        False
    """
    return bool(_IPV4_RE.match(ip))


def lookup(client: httpx.Client, ip: str) -> str:
    """Look up location data for an IPv4 address."""
    try:
        data = get_json(client, API_URL.format(ip=ip))

        if not isinstance(data, dict) or not data.get("country_name"):
            return f'No WHOIS data found for IP address "{ip}".'

        return (
            f"**IP Address**: {data.get('IPv4')}\n"
            f"**Country**: {data['country_name']}\n"
            f"**State**: {data.get('state') or 'N/A'}\n"
            f"**City**: {data.get('city') or 'N/A'}"
        )
    except Exception as e:
        logger.error(f"Error looking up IP address '{ip}': {e}")
        return ERROR_MESSAGE
