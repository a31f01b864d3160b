"""Urban Dictionary commands - short lookup posted to chat, detailed lookup in an alert."""
from __future__ import annotations

from command_center.commands.registry import command_registry, option_value
from command_center.core.datamodels import CommandContext, CommandOption, OptionType, OptionValue
from command_center.lookups import urban

TERM_OPTION = CommandOption(
    "term", "Term", "The term to look up on Urban Dictionary", OptionType.STRING,
)


@command_registry.register(
    "urbanlookup",
    "Look up a term on Urban Dictionary",
    id="UrbanDictionary-Lookup",
    options=[TERM_OPTION],
)
def cmd_urbanlookup(options: list[OptionValue], ctx: CommandContext):
    term = option_value(options, 0)
    if not term:
        return

    result = urban.lookup(ctx.plugin.http, term)
    if not ctx.channel_id:
        return
    ctx.plugin.send_message(ctx.channel_id, result)


@command_registry.register(
    "urban2",
    "Look up a term on Urban Dictionary and display detailed definitions in an alert window",
    id="UrbanDictionary-Lookup-Detailed",
    options=[TERM_OPTION],
    error_alert=("Error", "An error occurred while looking up the term."),
)
def cmd_urban2(options: list[OptionValue], ctx: CommandContext):
    """Show the most liked definitions in an alert."""
    term = option_value(options, 0)
    if not term:
        return

    body = urban.lookup_detailed(ctx.plugin.http, term)
    if body is None:
        ctx.plugin.host.alert(
            "No Definition Found",
            f'No definition found for "{term}" on Urban Dictionary.',
        )
        return

    ctx.plugin.host.alert(f"Urban Dictionary: {term}", body)
