"""Define command - look up a word in the dictionary."""
from __future__ import annotations

from command_center.commands.registry import command_registry, option_value
from command_center.core.datamodels import CommandContext, CommandOption, OptionType, OptionValue
from command_center.lookups import dictionary


@command_registry.register(
    "define",
    "Look up a term on Webster's Dictionary",
    id="WebsterDictionary-Lookup",
    options=[
        CommandOption("term", "Term", "The term to look up on Webster's Dictionary", OptionType.STRING),
    ],
)
def cmd_define(options: list[OptionValue], ctx: CommandContext):
    term = option_value(options, 0)
    if not term:
        return

    result = dictionary.lookup(ctx.plugin.http, term)
    if not ctx.channel_id:
        return
    ctx.plugin.send_message(ctx.channel_id, result)
