"""
External lookups used by the slash commands.

Each lookup issues a single GET through the shared httpx client and turns
failures into a fallback string or None.
"""

from command_center.lookups import dictionary, gifstuff, urban, whois
from command_center.lookups._http import create_client, get_json
from command_center.lookups.links import avatar_url, lmgtfy_link

__all__ = [
    "create_client",
    "get_json",
    "dictionary",
    "gifstuff",
    "urban",
    "whois",
    "avatar_url",
    "lmgtfy_link",
]
