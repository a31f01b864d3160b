"""LMGTFY command - post a "Let Me Google That For You" link."""
from __future__ import annotations

from command_center.commands.registry import command_registry, option_value
from command_center.core.datamodels import CommandContext, CommandOption, OptionType, OptionValue
from command_center.lookups.links import lmgtfy_link


@command_registry.register(
    "lmgtfy",
    'Generate a "Let Me Google That For You" link',
    id="Lmgtfy-Link",
    options=[
        CommandOption(
            "query", "Query", "The search query to generate the LMGTFY link for", OptionType.STRING,
        ),
    ],
)
def cmd_lmgtfy(options: list[OptionValue], ctx: CommandContext):
    query = option_value(options, 0)
    if not query or not ctx.channel_id:
        return
    ctx.plugin.send_message(ctx.channel_id, lmgtfy_link(query))
