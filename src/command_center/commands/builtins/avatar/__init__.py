"""Avatar command - post a user's avatar URL."""
from __future__ import annotations

from command_center.commands.registry import command_registry, option_value
from command_center.core.datamodels import CommandContext, CommandOption, OptionType, OptionValue
from command_center.lookups.links import avatar_url

USER_NOT_FOUND = "User not found!"


@command_registry.register(
    "avatar",
    "Get the avatar URL for a user",
    id="Avatar-Command",
    options=[
        CommandOption("user", "User", "The user to get the avatar URL for", OptionType.USER),
    ],
)
def cmd_avatar(options: list[OptionValue], ctx: CommandContext):
    """Post the avatar URL of the given user."""
    plugin = ctx.plugin
    user_id = option_value(options, 0)
    if not user_id:
        return

    user = plugin.host.get_user(user_id)
    if not user:
        plugin.send_message(ctx.channel_id, USER_NOT_FOUND)
        return

    plugin.send_message(ctx.channel_id, avatar_url(user_id, user.avatar))
