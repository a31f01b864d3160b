"""
Urban Dictionary lookups.
"""

from __future__ import annotations

import logging
from datetime import datetime

import httpx
from pydantic import BaseModel

from command_center.core.exceptions import LookupFailedError
from command_center.lookups._http import encode_component, get_json

logger = logging.getLogger(__name__)

API_URL = "https://api.urbandictionary.com/v0/define?term={term}"

ERROR_MESSAGE = "An error occurred while looking up the term."

# Number of entries shown by the detailed lookup
DETAILED_LIMIT = 4


class UrbanEntry(BaseModel):
    """One Urban Dictionary definition."""

    model_config = {"extra": "ignore"}

    definition: str = ""
    example: str = ""
    thumbs_up: int = 0
    thumbs_down: int = 0
    author: str = ""
    written_on: str = ""


def _fetch(client: httpx.Client, term: str) -> dict:
    url = API_URL.format(term=encode_component(term))
    data = get_json(client, url)
    if not isinstance(data, dict):
        raise LookupFailedError(f"Unexpected Urban Dictionary response: {data!r}")
    return data


def _strip_brackets(text: str) -> str:
    return text.replace("[", "").replace("]", "")


def _format_date(written_on: str) -> str:
    try:
        return datetime.fromisoformat(written_on.replace("Z", "+00:00")).astimezone().strftime("%c")
    except ValueError:
        return written_on


def lookup(client: httpx.Client, term: str) -> str:
    """Look up a term and format the top definition for chat.

    Returns:
        Formatted message, a "no results" message, or an error message.
    """
    try:
        data = _fetch(client, term)
        entries = data.get("list") or []
        if data.get("result_type") == "no_results" or not entries:
            return f'No results found for "{term}" on Urban Dictionary.'

        entry = UrbanEntry.model_validate(entries[0])
        return (
            f"**{encode_component(term)}**\n"
            f"**Definition**: {entry.definition}\n"
            f"**Example**: {entry.example}"
        )
    except Exception as e:
        logger.error(f"Error looking up term '{term}': {e}")
        return ERROR_MESSAGE


def lookup_detailed(client: httpx.Client, term: str) -> str | None:
    """Look up a term and render the most liked definitions as plain text.

    Returns:
        Alert body text, or None if nothing was found.

    Raises:
        httpx.HTTPError: On transport errors.
        LookupFailedError: If the response is not a definition list.
    """
    data = _fetch(client, term)
    entries = [UrbanEntry.model_validate(e) for e in data.get("list") or []]
    if not entries:
        return None

    entries.sort(key=lambda e: e.thumbs_up, reverse=True)

    blocks = []
    for index, entry in enumerate(entries[:DETAILED_LIMIT], start=1):
        blocks.append(
            f"Definition {index}:\n"
            f"{_strip_brackets(entry.definition)}\n"
            f"Example:\n"
            f"{_strip_brackets(entry.example)}\n"
            f"Likes: {entry.thumbs_up}, Dislikes: {entry.thumbs_down}, "
            f"Author: {entry.author}, Date: {_format_date(entry.written_on)}\n"
            f"------------------------------------------"
        )
    return "\n".join(blocks)
