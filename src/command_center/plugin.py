"""
Command Center plugin.

Owns all plugin state: the custom command config, the rewrite engine, the
reminder scheduler and the shared HTTP client. The host and the other
collaborators are passed in, so tests can replace any of them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from command_center.commands import command_registry, load_all_commands
from command_center.config import CONFIG_FILENAME, ConfigManager
from command_center.core.datamodels import (
    CommandContext,
    OptionValue,
    OutgoingMessage,
    SlashCommand,
)
from command_center.core.exceptions import CommandNotFoundError
from command_center.engine import CommandRewriter, ReminderScheduler
from command_center.engine.reminders import TimerFactory
from command_center.host import Host
from command_center.logging import close_file_logging, configure_file_logging
from command_center.lookups import create_client
from command_center.settings import SettingsPanel, render_settings_panel

logger = logging.getLogger(__name__)

# Plugin metadata
name = "Command Center"
version = "1.0.1"
description = "Several slash commands to have fun with, and custom commands functionality."
author = "CRAWNiiK"


class CommandCenterPlugin:
    """Slash commands plus prefix-triggered custom commands."""

    OWNER = "CommandCenter"

    def __init__(
        self,
        host: Host,
        http_client: Optional[httpx.Client] = None,
        timer_factory: Optional[TimerFactory] = None,
        config_file: Optional[Path] = None,
        log_to_file: bool = False,
    ):
        """
        Args:
            host: The chat client
            http_client: Client for lookups (created and owned by the plugin if None)
            timer_factory: Reminder timer factory (default: daemon threads)
            config_file: Custom command config (default: <plugin folder>/CommandCenter.config.json)
            log_to_file: Write a log file into the plugin folder
        """
        self.host = host
        self._owns_http = http_client is None
        self.http: httpx.Client = http_client or create_client()
        self.config_manager = ConfigManager(
            config_file or Path(host.plugin_folder) / CONFIG_FILENAME,
            notify=host.alert,
        )
        self.rewriter = CommandRewriter(lambda: self.config_manager.config)
        self.reminders = ReminderScheduler(self.send_message, timer_factory=timer_factory)
        self.commands: list[SlashCommand] = []
        self._log_to_file = log_to_file
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        """Register slash commands, hook outgoing messages and load the config."""
        if self._started:
            return

        if self._log_to_file:
            configure_file_logging(Path(self.host.plugin_folder) / "logs")

        loaded = load_all_commands()
        self.commands = command_registry.bind(self)
        logger.info(f"Loaded {loaded} command modules, {len(self.commands)} slash commands")

        self.host.patch_command_lookup(self.OWNER, self._append_commands)
        self.host.patch_send_message(self.OWNER, self.rewriter.intercept)

        self.config_manager.load()
        self._started = True

    def stop(self) -> None:
        """Remove hooks. Pending reminders are left to fire."""
        if not self._started:
            return

        self.host.unpatch_all(self.OWNER)
        self.commands = []
        if self._owns_http:
            self.http.close()
        if self._log_to_file:
            close_file_logging()
        self._started = False

    def _append_commands(self, result: list[SlashCommand]) -> None:
        """After-hook on the host's command lookup."""
        if not self.commands:
            logger.error("One or more commands are undefined.")
            return
        result.extend(self.commands)

    def send_message(self, channel_id: str | None, content: str) -> None:
        """Send a plain message. Skipped without a channel."""
        if not channel_id:
            logger.debug("No channel to send to, message dropped")
            return
        self.host.send_message(channel_id, OutgoingMessage(content=content))

    def get_command(self, name: str) -> SlashCommand:
        """Get a bound slash command by name.

        Raises:
            CommandNotFoundError: If the plugin has no such command.
        """
        for command in self.commands:
            if command.name == name:
                return command
        raise CommandNotFoundError(f"Unknown command: {name}")

    def run_command(self, name: str, *values: str, channel_id: str | None = None) -> None:
        """Execute a slash command with positional option values."""
        command = self.get_command(name)
        options = [
            OptionValue(name=option.name, value=value)
            for option, value in zip(command.options, values)
        ]
        command.execute(options, CommandContext(channel_id=channel_id))

    def get_settings_panel(self) -> SettingsPanel:
        return render_settings_panel(self.config_manager)
