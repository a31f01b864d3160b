"""
Data models shared between the plugin and its host.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Optional

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from command_center.plugin import CommandCenterPlugin


class CommandType(IntEnum):
    """Host command types."""
    CHAT = 1


class InputType(IntEnum):
    """Host command input sources."""
    BUILT_IN = 0


class OptionType(IntEnum):
    """Host option value types."""
    STRING = 3
    USER = 6


# Host application id used for built-in commands
BUILT_IN_APPLICATION_ID = "-1"


class User(BaseModel):
    """A chat user as returned by the host's user lookup."""
    id: str
    username: str = ""
    avatar: Optional[str] = None

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"


class OutgoingMessage(BaseModel):
    """An outgoing chat message. ``content`` is mutable."""
    content: str
    tts: bool = False
    invalid_emojis: list[Any] = Field(default_factory=list)
    valid_non_shortcut_emojis: list[Any] = Field(default_factory=list)


@dataclass
class CommandOption:
    """A typed argument of a slash command."""

    name: str
    display_name: str
    description: str
    type: OptionType = OptionType.STRING
    required: bool = True

    @property
    def display_description(self) -> str:
        return self.description


@dataclass
class OptionValue:
    """A value supplied by the user for one option."""

    name: str
    value: Any = None


@dataclass
class CommandContext:
    """Context passed to slash command handlers."""

    channel_id: str | None = None
    plugin: "CommandCenterPlugin | None" = None


@dataclass
class SlashCommand:
    """A host-native slash command record."""

    id: str
    name: str
    description: str
    execute: Callable[[list[OptionValue], CommandContext], None]
    options: list[CommandOption] = field(default_factory=list)
    type: CommandType = CommandType.CHAT
    input_type: InputType = InputType.BUILT_IN
    application_id: str = BUILT_IN_APPLICATION_ID

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def display_description(self) -> str:
        return self.description
