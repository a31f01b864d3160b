"""
Slash command registry.

Commands are registered with a name, handler function, and metadata, then
bound to a running plugin to produce host SlashCommand records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from command_center.core.datamodels import (
    CommandContext,
    CommandOption,
    OptionValue,
    SlashCommand,
)
from command_center.logging import log_exception

if TYPE_CHECKING:
    from command_center.plugin import CommandCenterPlugin

Handler = Callable[[list[OptionValue], CommandContext], None]


@dataclass
class CommandEntry:
    """Entry for a registered command."""

    name: str
    handler: Handler
    description: str
    id: str
    options: list[CommandOption] = field(default_factory=list)
    # Shown to the user when the handler raises
    error_alert: tuple[str, str] | None = None
    error_message: str | None = None


class SlashCommandRegistry:
    """Registry for slash commands."""

    def __init__(self):
        self._commands: dict[str, CommandEntry] = {}

    def register(
        self,
        name: str,
        description: str,
        id: str | None = None,
        options: list[CommandOption] | None = None,
        error_alert: tuple[str, str] | None = None,
        error_message: str | None = None,
    ) -> Callable:
        """Decorator to register a command.

        Args:
            name: Command name without the / prefix (e.g., "qr")
            description: Short description shown by the host
            id: Stable host id (default: "<name>-Command")
            options: Typed arguments, in positional order
            error_alert: (title, body) alert shown if the handler raises
            error_message: Chat message sent if the handler raises

        Example:
            @command_registry.register("rainbow", "Post a rainbow video URL")
            def cmd_rainbow(options, ctx):
                ctx.plugin.send_message(ctx.channel_id, RAINBOW_URL)
        """
        def decorator(func: Handler) -> Handler:
            self._commands[name] = CommandEntry(
                name=name,
                handler=func,
                description=description,
                id=id or f"{name.capitalize()}-Command",
                options=options or [],
                error_alert=error_alert,
                error_message=error_message,
            )
            return func
        return decorator

    def get(self, name: str) -> CommandEntry | None:
        """Get a command by name."""
        return self._commands.get(name)

    def all_commands(self) -> list[CommandEntry]:
        """Get all registered commands sorted by name."""
        return sorted(self._commands.values(), key=lambda e: e.name)

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def bind(self, plugin: "CommandCenterPlugin") -> list[SlashCommand]:
        """Build host SlashCommand records whose execute runs against plugin."""
        return [
            SlashCommand(
                id=entry.id,
                name=entry.name,
                description=entry.description,
                options=list(entry.options),
                execute=_bind_execute(entry, plugin),
            )
            for entry in self.all_commands()
        ]


def _bind_execute(entry: CommandEntry, plugin: "CommandCenterPlugin") -> Callable:
    def execute(options: list[OptionValue], ctx: CommandContext | None = None) -> None:
        channel_id = ctx.channel_id if ctx else None
        ctx = CommandContext(
            channel_id=channel_id or plugin.host.get_selected_channel_id(),
            plugin=plugin,
        )
        try:
            entry.handler(list(options or []), ctx)
        except Exception as e:
            log_exception(e, f"Error executing {entry.name} command")
            if entry.error_alert:
                plugin.host.alert(*entry.error_alert)
            elif entry.error_message:
                plugin.send_message(ctx.channel_id, entry.error_message)

    execute.__name__ = f"execute_{entry.name}"
    return execute


def option_value(options: list[OptionValue], index: int) -> str:
    """Positional option value as a string, or "" if absent."""
    if index >= len(options):
        return ""
    value = options[index].value
    return "" if value is None else str(value)


# Global command registry
command_registry = SlashCommandRegistry()
