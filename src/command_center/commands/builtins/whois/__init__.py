"""Whois command - show IP geolocation data in an alert."""
from __future__ import annotations

from command_center.commands.registry import command_registry, option_value
from command_center.core.datamodels import CommandContext, CommandOption, OptionType, OptionValue
from command_center.lookups import whois


@command_registry.register(
    "whois",
    "Look up WHOIS information for an IP address",
    id="Whois-Lookup",
    options=[
        CommandOption(
            "ip", "IP Address", "The IP address to look up WHOIS information for", OptionType.STRING,
        ),
    ],
    error_alert=("Error", "an error has occurred"),
)
def cmd_whois(options: list[OptionValue], ctx: CommandContext):
    """Results are only shown to the caller, never posted."""
    ip = option_value(options, 0)
    if not ip or not whois.is_valid_ipv4(ip):
        ctx.plugin.host.alert("Error", "Please provide a valid IPv4 address.")
        return

    ctx.plugin.host.alert("IP Info", whois.lookup(ctx.plugin.http, ip))
