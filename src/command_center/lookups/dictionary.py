"""Dictionary/word definition lookup.

Uses the Free Dictionary API.
"""

from __future__ import annotations

import logging

import httpx

from command_center.lookups._http import encode_component, get_json

logger = logging.getLogger(__name__)

API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/{term}"

ERROR_MESSAGE = "An error occurred while looking up the term on Webster's Dictionary."


def lookup(client: httpx.Client, term: str) -> str:
    """Look up the definition of a word.

    Args:
        client: Shared HTTP client.
        term: The word to define.

    Returns:
        Formatted definition with example, a "no results" message, or an
        error message.
    """
    try:
        data = get_json(client, API_URL.format(term=encode_component(term)))

        if isinstance(data, dict) and data.get("title") == "No Definitions Found":
            return f'No results found for "{term}" on Webster\'s Dictionary.'

        defn = data[0]["meanings"][0]["definitions"][0]
        definition = defn["definition"]
        example = defn.get("example") or "No example available."
        return (
            f"**{encode_component(term)}**\n"
            f"**Definition**: {definition}\n"
            f"**Example**: {example}"
        )
    except Exception as e:
        logger.error(f"Error looking up term '{term}': {e}")
        return ERROR_MESSAGE
