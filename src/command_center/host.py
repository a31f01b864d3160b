"""
Host interface.

The embedding chat client implements this protocol and passes it to
CommandCenterPlugin. Nothing in this package discovers host modules on its
own; every capability the plugin uses is listed here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Protocol

from command_center.core.datamodels import OutgoingMessage, SlashCommand, User

# Called with the host's command list after its own lookup; may append to it.
CommandLookupPatch = Callable[[list[SlashCommand]], None]

# Called before a message is sent. Returning a tuple replaces the send args.
SendMessagePatch = Callable[
    [str, OutgoingMessage], Optional[tuple[str, OutgoingMessage]]
]


class Host(Protocol):
    """Capabilities the plugin needs from the chat client."""

    @property
    def plugin_folder(self) -> Path:
        """Directory where plugins keep their files."""
        ...

    def send_message(self, channel_id: str, message: OutgoingMessage) -> None:
        ...

    def get_user(self, user_id: str) -> User | None:
        ...

    def get_selected_channel_id(self) -> str | None:
        ...

    def alert(self, title: str, body: str) -> None:
        """Show a blocking, user-visible alert."""
        ...

    def patch_command_lookup(self, owner: str, callback: CommandLookupPatch) -> None:
        ...

    def patch_send_message(self, owner: str, callback: SendMessagePatch) -> None:
        ...

    def unpatch_all(self, owner: str) -> None:
        ...
