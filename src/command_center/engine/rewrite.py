"""
Custom command rewrite engine.

Replaces the body of an outgoing message when it starts with the configured
prefix followed by a known command name:

    ./hello           -> "Hello, world!"
    ./hello anything  -> "Hello, world!"
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from command_center.config import Config
from command_center.core.datamodels import OutgoingMessage

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


def split_command(content: str, prefix: str) -> tuple[str, str] | None:
    """Split message text into (command name, args).

    Args:
        content: Outgoing message text
        prefix: Configured command prefix

    Returns:
        Tuple of (name, args) or None if the text does not start with prefix.
        The name may be empty (e.g. a bare prefix).
    """
    if not content.startswith(prefix):
        return None

    token = _WHITESPACE.split(content, maxsplit=1)[0]
    name = token[len(prefix):]
    args = content[len(prefix) + len(name):].strip()
    return name, args


class CommandRewriter:
    """Rewrites outgoing messages from the custom command table.

    The config is read through a callable so that prefix and command edits
    take effect on the next send without re-registering the hook.
    """

    def __init__(self, get_config: Callable[[], Config]):
        self._get_config = get_config

    def rewrite(self, content: str) -> str | None:
        """Return the replacement text for content, or None if no command matches."""
        config = self._get_config()
        parts = split_command(content, config.prefix)
        if parts is None:
            return None

        name, args = parts
        response = config.get_response(name)
        if response is None:
            return None

        logger.debug(f"Custom command '{name}' matched (args: {args!r})")
        return response

    def intercept(
        self,
        channel_id: str,
        message: OutgoingMessage,
    ) -> tuple[str, OutgoingMessage] | None:
        """Before-send hook. Mutates message in place on a match.

        Returns:
            (channel_id, message) when the message was rewritten, else None.
        """
        replacement = self.rewrite(message.content)
        if replacement is None:
            return None

        message.content = replacement
        return channel_id, message
