"""
Shared HTTP helpers for lookups.
"""

from __future__ import annotations

import urllib.parse
from typing import Any

import httpx

from command_center.core.exceptions import LookupFailedError

USER_AGENT = "CommandCenter/1.0.1"


def create_client() -> httpx.Client:
    """Create the HTTP client shared by all lookups."""
    return httpx.Client(
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
    )


def get_json(client: httpx.Client, url: str) -> Any:
    """GET url and decode the JSON body.

    The body is decoded regardless of status code, since several APIs report
    "not found" as a JSON document with a 404.

    Raises:
        httpx.HTTPError: On transport errors.
        LookupFailedError: If the body is not JSON.
    """
    response = client.get(url)
    try:
        return response.json()
    except ValueError as e:
        raise LookupFailedError(f"Non-JSON response from {url} (HTTP {response.status_code})") from e


def encode_component(value: str) -> str:
    """Percent-encode a URL component, leaving the same characters as JS encodeURIComponent."""
    return urllib.parse.quote(value, safe="!~*'()")
