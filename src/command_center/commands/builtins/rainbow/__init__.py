"""Rainbow command - post a fixed video URL."""
from __future__ import annotations

from command_center.commands.registry import command_registry
from command_center.core.datamodels import CommandContext, OptionValue
from command_center.lookups.links import RAINBOW_URL


@command_registry.register(
    "rainbow",
    "Post a rainbow video URL",
    id="Rainbow-Command",
    error_message="An error occurred while executing the command.",
)
def cmd_rainbow(options: list[OptionValue], ctx: CommandContext):
    ctx.plugin.send_message(ctx.channel_id, RAINBOW_URL)
