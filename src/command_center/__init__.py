"""
command_center - slash commands and custom commands for a chat client.

Provides a set of slash commands (lookups, GIF effects, reminders) and a
prefix-triggered text replacement system for outgoing messages.

Example usage:
    from command_center import CommandCenterPlugin

    plugin = CommandCenterPlugin(host)   # host implements command_center.host.Host
    plugin.start()

    # "./hello" typed by the user is now sent as "Hello, world!"
"""

__version__ = "1.0.1"

from command_center.config import Config, ConfigManager
from command_center.core import (
    CommandCenterError,
    CommandContext,
    CommandOption,
    OptionType,
    OptionValue,
    OutgoingMessage,
    SlashCommand,
    User,
)
from command_center.engine import CommandRewriter, ReminderScheduler, parse_delay
from command_center.host import Host
from command_center.plugin import CommandCenterPlugin

__all__ = [
    # Version
    "__version__",
    # Plugin
    "CommandCenterPlugin",
    "Host",
    # Config
    "Config",
    "ConfigManager",
    # Engine
    "CommandRewriter",
    "ReminderScheduler",
    "parse_delay",
    # Models
    "CommandContext",
    "CommandOption",
    "OptionType",
    "OptionValue",
    "OutgoingMessage",
    "SlashCommand",
    "User",
    # Exceptions
    "CommandCenterError",
]
