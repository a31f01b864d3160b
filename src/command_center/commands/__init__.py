"""
Slash commands for Command Center.

Builtin commands register themselves with ``command_registry`` when their
package is imported by ``load_all_commands``.
"""

from __future__ import annotations

from command_center.commands.registry import (
    CommandEntry,
    SlashCommandRegistry,
    command_registry,
    option_value,
)
from command_center.commands.loader import load_all_commands

__all__ = [
    "CommandEntry",
    "SlashCommandRegistry",
    "command_registry",
    "option_value",
    "load_all_commands",
]
