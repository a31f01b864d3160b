"""QR command - post a QR code image for a URL."""
from __future__ import annotations

from command_center.commands.registry import command_registry, option_value
from command_center.core.datamodels import CommandContext, CommandOption, OptionType, OptionValue
from command_center.lookups.gifstuff import generate_qr_code


@command_registry.register(
    "qr",
    "Generate a QR code for the given URL",
    id="QRCode-Generator",
    options=[
        CommandOption("url", "URL", "The URL to generate a QR code for", OptionType.STRING),
    ],
    error_alert=("Error", "An error occurred while generating the QR code."),
)
def cmd_qr(options: list[OptionValue], ctx: CommandContext):
    url = option_value(options, 0)
    if not url:
        return

    qr_url = generate_qr_code(ctx.plugin.http, url)
    if not qr_url:
        ctx.plugin.host.alert("Error", "Failed to generate QR code.")
        return

    if not ctx.channel_id:
        return
    ctx.plugin.send_message(ctx.channel_id, qr_url)
