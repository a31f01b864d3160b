#!/usr/bin/env python3
"""
Tests for the command registry, the loader and the builtin slash commands.
"""

import pytest

from command_center.commands.loader import PACKAGE_BUILTINS_DIR, discover_commands, load_command
from command_center.commands.registry import SlashCommandRegistry, option_value
from command_center.core.datamodels import (
    BUILT_IN_APPLICATION_ID,
    CommandContext,
    CommandOption,
    CommandType,
    InputType,
    OptionType,
    OptionValue,
)
from command_center.engine.reminders import (
    DELAY_TOO_LONG_MESSAGE,
    INVALID_FORMAT_MESSAGE,
    INVALID_UNIT_MESSAGE,
)
from command_center.lookups.links import RAINBOW_URL

URBAN_HOST = "api.urbandictionary.com"
DICT_HOST = "api.dictionaryapi.dev"
GEO_HOST = "geolocation-db.com"
GIF_HOST = "gifstuffapi.com"

EXPECTED_IDS = {
    "avatar": "Avatar-Command",
    "define": "WebsterDictionary-Lookup",
    "lmgtfy": "Lmgtfy-Link",
    "money": "Money-Generator",
    "petpet": "PetPet-Generator",
    "pizza": "Pizza-Generator",
    "qr": "QRCode-Generator",
    "rainbow": "Rainbow-Command",
    "remind": "Remind-Command",
    "swirl": "Swirl-Generator",
    "urban2": "UrbanDictionary-Lookup-Detailed",
    "urbanlookup": "UrbanDictionary-Lookup",
    "whois": "Whois-Lookup",
}


# ============================================================================
# Registry Tests
# ============================================================================

class TestSlashCommandRegistry:
    """Tests for SlashCommandRegistry."""

    def test_register_defaults(self):
        registry = SlashCommandRegistry()

        @registry.register("ping", "Reply with pong")
        def cmd_ping(options, ctx):
            pass

        entry = registry.get("ping")
        assert entry.id == "Ping-Command"
        assert entry.options == []
        assert entry.handler is cmd_ping
        assert "ping" in registry
        assert len(registry) == 1

    def test_all_commands_sorted(self):
        registry = SlashCommandRegistry()
        for name in ["zeta", "alpha", "mid"]:
            registry.register(name, name)(lambda options, ctx: None)
        assert [e.name for e in registry.all_commands()] == ["alpha", "mid", "zeta"]

    def test_bind_builds_slash_commands(self, plugin):
        registry = SlashCommandRegistry()
        option = CommandOption("term", "Term", "What to look up")

        @registry.register("look", "Look something up", id="Look-Lookup", options=[option])
        def cmd_look(options, ctx):
            pass

        (command,) = registry.bind(plugin)
        assert command.id == "Look-Lookup"
        assert command.display_name == "look"
        assert command.display_description == "Look something up"
        assert command.type == CommandType.CHAT
        assert command.input_type == InputType.BUILT_IN
        assert command.application_id == BUILT_IN_APPLICATION_ID
        assert command.options == [option]

    def test_execute_falls_back_to_selected_channel(self, plugin, host):
        registry = SlashCommandRegistry()
        seen = []
        registry.register("where", "Where am I")(lambda options, ctx: seen.append(ctx))

        (command,) = registry.bind(plugin)
        command.execute([], CommandContext())
        command.execute([], CommandContext(channel_id="chan-9"))

        assert seen[0].channel_id == "chan-1"
        assert seen[1].channel_id == "chan-9"
        assert seen[0].plugin is plugin

    def test_execute_error_alert(self, plugin, host, caplog):
        registry = SlashCommandRegistry()

        def boom(options, ctx):
            raise RuntimeError("kaboom")

        registry.register("boom", "Explodes", error_alert=("Error", "It broke."))(boom)
        (command,) = registry.bind(plugin)
        command.execute([], CommandContext())

        assert host.alerts == [("Error", "It broke.")]
        assert host.sent == []
        assert "kaboom" in caplog.text

    def test_execute_error_message(self, plugin, host):
        registry = SlashCommandRegistry()

        def boom(options, ctx):
            raise RuntimeError("kaboom")

        registry.register("boom", "Explodes", error_message="That failed.")(boom)
        (command,) = registry.bind(plugin)
        command.execute([], CommandContext(channel_id="chan-2"))

        assert host.sent == [("chan-2", "That failed.")]
        assert host.alerts == []

    def test_execute_error_without_feedback(self, plugin, host):
        registry = SlashCommandRegistry()

        def boom(options, ctx):
            raise RuntimeError("kaboom")

        registry.register("boom", "Explodes")(boom)
        (command,) = registry.bind(plugin)
        command.execute([], CommandContext())

        assert host.sent == []
        assert host.alerts == []

    def test_option_value(self):
        options = [OptionValue("a", "x"), OptionValue("b", None), OptionValue("c", 5)]
        assert option_value(options, 0) == "x"
        assert option_value(options, 1) == ""
        assert option_value(options, 2) == "5"
        assert option_value(options, 3) == ""


# ============================================================================
# Loader Tests
# ============================================================================

class TestLoader:
    """Tests for command discovery and import."""

    def test_discover_builtins(self):
        names = discover_commands(PACKAGE_BUILTINS_DIR)
        assert names == sorted(names)
        assert {"avatar", "define", "gif_effects", "lmgtfy", "qr",
                "rainbow", "remind", "urban", "whois"} <= set(names)

    def test_discover_skips_private_and_plain_dirs(self, tmp_path):
        (tmp_path / "good").mkdir()
        (tmp_path / "good" / "__init__.py").write_text("")
        (tmp_path / "_private").mkdir()
        (tmp_path / "_private" / "__init__.py").write_text("")
        (tmp_path / "no_init").mkdir()
        (tmp_path / "file.py").write_text("")

        assert discover_commands(tmp_path) == ["good"]

    def test_discover_missing_dir(self, tmp_path):
        assert discover_commands(tmp_path / "missing") == []

    def test_load_command_failure(self):
        name, ok, error = load_command("does_not_exist")
        assert name == "does_not_exist"
        assert not ok
        assert error.startswith("Import error")


# ============================================================================
# Builtin Command Tests
# ============================================================================

class TestRegistration:
    """Tests for the plugin's command set as seen by the host."""

    def test_all_commands_listed(self, plugin, host):
        listed = {c.name: c.id for c in host.list_commands()}
        assert listed == EXPECTED_IDS

    def test_user_options_typed(self, plugin):
        for name in ["avatar", "petpet", "swirl", "pizza", "money", "remind"]:
            assert plugin.get_command(name).options[0].type == OptionType.USER

    def test_remind_options(self, plugin):
        options = plugin.get_command("remind").options
        assert [o.name for o in options] == ["user", "time", "message"]
        assert all(o.required for o in options)


class TestAvatarCommand:
    def test_unknown_user(self, plugin, host):
        plugin.run_command("avatar", "42")
        assert host.sent == [("chan-1", "User not found!")]

    def test_known_user(self, plugin, host):
        host.add_user("42", avatar="deadbeef")
        plugin.run_command("avatar", "42", channel_id="chan-7")
        assert host.sent == [("chan-7", "https://cdn.discordapp.com/avatars/42/deadbeef.png")]


class TestUrbanCommands:
    def test_urbanlookup(self, plugin, host, api):
        api.json(URBAN_HOST, {"list": [{"definition": "hi", "example": "hi there"}]})
        plugin.run_command("urbanlookup", "hey")
        assert host.sent == [("chan-1", "**hey**\n**Definition**: hi\n**Example**: hi there")]

    def test_urbanlookup_without_channel(self, plugin, host, api):
        host.selected_channel_id = None
        api.json(URBAN_HOST, {"list": [{"definition": "hi", "example": "hi there"}]})
        plugin.run_command("urbanlookup", "hey")
        assert host.sent == []

    def test_urban2_success(self, plugin, host, api):
        api.json(URBAN_HOST, {"list": [{"definition": "hi", "example": "ex", "thumbs_up": 3}]})
        plugin.run_command("urban2", "hey")

        assert host.sent == []
        title, body = host.alerts[0]
        assert title == "Urban Dictionary: hey"
        assert body.startswith("Definition 1:\nhi\nExample:\nex\nLikes: 3")

    def test_urban2_no_results(self, plugin, host, api):
        api.json(URBAN_HOST, {"list": []})
        plugin.run_command("urban2", "zzqx")
        assert host.alerts == [
            ("No Definition Found", 'No definition found for "zzqx" on Urban Dictionary.'),
        ]

    def test_urban2_error(self, plugin, host, api):
        api.fail(URBAN_HOST)
        plugin.run_command("urban2", "hey")
        assert host.alerts == [("Error", "An error occurred while looking up the term.")]


class TestLinkCommands:
    def test_lmgtfy(self, plugin, host):
        plugin.run_command("lmgtfy", "cats & dogs")
        assert host.sent == [("chan-1", "https://letmegooglethat.com/?q=cats%20%26%20dogs")]

    def test_rainbow(self, plugin, host):
        plugin.run_command("rainbow")
        assert host.sent == [("chan-1", RAINBOW_URL)]


class TestGifCommands:
    @pytest.mark.parametrize("effect,display", [
        ("petpet", "PetPet"), ("swirl", "Swirl"), ("pizza", "Pizza"), ("money", "Money"),
    ])
    def test_failure_message(self, plugin, host, api, effect, display):
        host.add_user("42")
        api.json(GIF_HOST, {"error": "nope"})
        plugin.run_command(effect, "42")
        assert host.sent == [("chan-1", f"Failed to generate {display} GIF.")]

    def test_success(self, plugin, host, api):
        host.add_user("42", avatar="abc")
        api.json(GIF_HOST, {"url": "https://gifstuffapi.com/out/1.gif"})

        plugin.run_command("petpet", "42")

        assert host.sent == [("chan-1", "https://gifstuffapi.com/out/1.gif")]
        assert api.requests[0].url.params["image"] == (
            "https://cdn.discordapp.com/avatars/42/abc.png"
        )

    def test_unknown_user(self, plugin, host, api):
        plugin.run_command("swirl", "99")
        assert host.sent == [("chan-1", "User not found!")]
        assert api.requests == []


class TestDefineCommand:
    def test_define(self, plugin, host, api):
        api.json(DICT_HOST, [{"meanings": [{"definitions": [{"definition": "A cat."}]}]}])
        plugin.run_command("define", "cat")
        assert host.sent == [(
            "chan-1",
            "**cat**\n**Definition**: A cat.\n**Example**: No example available.",
        )]


class TestWhoisCommand:
    def test_invalid_ip(self, plugin, host, api):
        plugin.run_command("whois", "999.1.1.1")
        assert host.alerts == [("Error", "Please provide a valid IPv4 address.")]
        assert api.requests == []

    def test_valid_ip(self, plugin, host, api):
        api.json(GEO_HOST, {"country_name": "France", "state": None, "city": "Paris", "IPv4": "1.2.3.4"})
        plugin.run_command("whois", "1.2.3.4")

        assert host.sent == []
        assert host.alerts == [(
            "IP Info",
            "**IP Address**: 1.2.3.4\n**Country**: France\n**State**: N/A\n**City**: Paris",
        )]


class TestQrCommand:
    def test_success(self, plugin, host, api):
        api.json(GIF_HOST, {"url": "https://gifstuffapi.com/out/qr.png"})
        plugin.run_command("qr", "https://example.com")
        assert host.sent == [("chan-1", "https://gifstuffapi.com/out/qr.png")]

    def test_failure(self, plugin, host, api):
        api.fail(GIF_HOST)
        plugin.run_command("qr", "https://example.com")
        assert host.alerts == [("Error", "Failed to generate QR code.")]
        assert host.sent == []


class TestRemindCommand:
    def test_sets_reminder(self, plugin, host, timers):
        host.add_user("42")

        plugin.run_command("remind", "42", "10m", "stretch", channel_id="chan-3")

        assert host.sent == [("chan-3", "Reminder set for <@42> in 10m.")]
        assert len(timers.timers) == 1
        assert timers.timers[0].interval == 600.0
        assert timers.timers[0].started

    def test_reminder_fires(self, plugin, host, timers):
        host.add_user("42")
        plugin.run_command("remind", "42", "1h", "stand up")

        timers.timers[0].fire()

        assert host.sent[-1] == ("chan-1", "<@42>, reminder: stand up")
        assert plugin.reminders.pending("42") == []

    def test_invalid_unit(self, plugin, host, timers):
        host.add_user("42")
        plugin.run_command("remind", "42", "10x", "stretch")
        assert host.sent == [("chan-1", INVALID_UNIT_MESSAGE)]
        assert timers.timers == []

    def test_invalid_format(self, plugin, host, timers):
        host.add_user("42")
        plugin.run_command("remind", "42", "soon", "stretch")
        assert host.sent == [("chan-1", INVALID_FORMAT_MESSAGE)]
        assert timers.timers == []

    def test_delay_too_long(self, plugin, host, timers):
        host.add_user("42")
        plugin.run_command("remind", "42", "99999999999h", "stretch")
        assert host.sent == [("chan-1", DELAY_TOO_LONG_MESSAGE)]
        assert timers.timers == []
        assert plugin.reminders.pending("42") == []

    def test_unknown_user(self, plugin, host, timers):
        plugin.run_command("remind", "42", "10m", "stretch")
        assert host.sent == [("chan-1", "User not found!")]
        assert timers.timers == []

    def test_missing_option(self, plugin, host, timers):
        host.add_user("42")
        plugin.run_command("remind", "42", "10m")
        assert host.sent == []
        assert timers.timers == []
