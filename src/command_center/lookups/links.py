"""
Link builders that need no network access.
"""

from command_center.lookups._http import encode_component

LMGTFY_URL = "https://letmegooglethat.com/?q={query}"
AVATAR_URL = "https://cdn.discordapp.com/avatars/{user_id}/{avatar}.png"
RAINBOW_URL = "https://tehurn.com/media/RainbowTroloload.webm"


def lmgtfy_link(query: str) -> str:
    """Build a "Let Me Google That For You" link."""
    return LMGTFY_URL.format(query=encode_component(query))


def avatar_url(user_id: str, avatar: str | None) -> str:
    return AVATAR_URL.format(user_id=user_id, avatar=avatar)
