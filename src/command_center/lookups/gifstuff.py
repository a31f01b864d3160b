"""
Image generation through gifstuffapi.com (QR codes and avatar GIF effects).
"""

from __future__ import annotations

import logging

import httpx

from command_center.lookups._http import encode_component, get_json

logger = logging.getLogger(__name__)

QR_URL = "https://gifstuffapi.com/qr/?url={url}"
EFFECT_URL = "https://gifstuffapi.com/{effect}/?image={image}"

# effect path -> display name
GIF_EFFECTS = {
    "petpet": "PetPet",
    "swirl": "Swirl",
    "pizza": "Pizza",
    "money": "Money",
}


def _result_url(data: object) -> str | None:
    if not isinstance(data, dict) or data.get("error") or not data.get("url"):
        return None
    return data["url"]


def generate_qr_code(client: httpx.Client, url: str) -> str | None:
    """Generate a QR code image for url.

    Returns:
        Image URL, or None on any failure.
    """
    try:
        data = get_json(client, QR_URL.format(url=encode_component(url)))
    except Exception as e:
        logger.error(f"Error generating QR code: {e}")
        return None

    result = _result_url(data)
    if result is None:
        logger.error(f"No URL found in the QR API response: {data}")
    return result


def generate_gif(client: httpx.Client, effect: str, image_url: str) -> str | None:
    """Apply a GIF effect to an image.

    Args:
        client: Shared HTTP client
        effect: One of GIF_EFFECTS
        image_url: Source image (usually an avatar URL)

    Returns:
        GIF URL, or None on any failure.
    """
    if effect not in GIF_EFFECTS:
        raise ValueError(f"Unknown GIF effect: {effect}")

    url = EFFECT_URL.format(effect=effect, image=encode_component(image_url))
    try:
        data = get_json(client, url)
    except Exception as e:
        logger.error(f"Error generating {effect} GIF: {e}")
        return None

    result = _result_url(data)
    if result is None:
        logger.warning(f"{effect} GIF generation failed: {data}")
    return result
