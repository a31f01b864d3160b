"""GIF effect commands - petpet, swirl, pizza and money GIFs from a user's avatar."""
from __future__ import annotations

from typing import Callable

from command_center.commands.registry import command_registry, option_value
from command_center.core.datamodels import CommandContext, CommandOption, OptionType, OptionValue
from command_center.lookups.gifstuff import GIF_EFFECTS, generate_gif
from command_center.lookups.links import avatar_url

USER_NOT_FOUND = "User not found!"

# effect -> host command id
COMMAND_IDS = {
    "petpet": "PetPet-Generator",
    "swirl": "Swirl-Generator",
    "pizza": "Pizza-Generator",
    "money": "Money-Generator",
}


def make_gif_command(effect: str) -> Callable[[list[OptionValue], CommandContext], None]:
    """Build the handler for one GIF effect."""
    display = GIF_EFFECTS[effect]

    def handler(options: list[OptionValue], ctx: CommandContext):
        plugin = ctx.plugin
        user_id = option_value(options, 0)
        if not user_id:
            return

        user = plugin.host.get_user(user_id)
        if not user:
            plugin.send_message(ctx.channel_id, USER_NOT_FOUND)
            return

        gif_url = generate_gif(plugin.http, effect, avatar_url(user_id, user.avatar))
        if not gif_url:
            plugin.send_message(ctx.channel_id, f"Failed to generate {display} GIF.")
            return

        plugin.send_message(ctx.channel_id, gif_url)

    handler.__name__ = f"cmd_{effect}"
    return handler


for _effect, _display in GIF_EFFECTS.items():
    command_registry.register(
        _effect,
        f"Generate a {_display} GIF from the user avatar",
        id=COMMAND_IDS[_effect],
        options=[
            CommandOption(
                "user", "User", f"The user to generate the {_display} GIF for", OptionType.USER,
            ),
        ],
    )(make_gif_command(_effect))
