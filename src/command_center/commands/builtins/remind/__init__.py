"""Remind command - mention a user in this channel after a delay."""
from __future__ import annotations

from command_center.commands.registry import command_registry, option_value
from command_center.core.datamodels import CommandContext, CommandOption, OptionType, OptionValue
from command_center.core.exceptions import InvalidDelayError
from command_center.engine.reminders import parse_delay

USER_NOT_FOUND = "User not found!"


@command_registry.register(
    "remind",
    "Set a reminder for a user",
    id="Remind-Command",
    options=[
        CommandOption("user", "User", "The user to remind", OptionType.USER),
        CommandOption(
            "time", "Time", "The time to wait before reminding (e.g., 10m, 1h)", OptionType.STRING,
        ),
        CommandOption("message", "Message", "The message to remind the user of", OptionType.STRING),
    ],
    error_message="An error occurred while setting the reminder.",
)
def cmd_remind(options: list[OptionValue], ctx: CommandContext):
    """Usage: /remind <user> <10m|1h> <message>"""
    plugin = ctx.plugin
    user_id = option_value(options, 0)
    time_token = option_value(options, 1)
    message = option_value(options, 2)
    if not user_id or not time_token or not message:
        return

    if not plugin.host.get_user(user_id):
        plugin.send_message(ctx.channel_id, USER_NOT_FOUND)
        return

    try:
        amount, unit, delay_ms = parse_delay(time_token)
    except InvalidDelayError as e:
        plugin.send_message(ctx.channel_id, str(e))
        return

    plugin.reminders.set_reminder(user_id, delay_ms, message, ctx.channel_id)
    plugin.send_message(ctx.channel_id, f"Reminder set for <@{user_id}> in {amount}{unit}.")
