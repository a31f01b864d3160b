"""
Configuration management for Command Center custom commands.

The config lives in a JSON file inside the host's plugin folder:

    {
      "prefix": "./",
      "commands": {"hello": "Hello, world!", ...}
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from command_center.core.exceptions import ConfigLoadError, ConfigSaveError, ConfigValidationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "CommandCenter.config.json"

DEFAULT_PREFIX = "./"

# Default values - single source of truth
DEFAULT_COMMANDS: dict[str, str] = {
    "hello": "Hello, world!",
    "rules": (
        "**Server Rules:**\n"
        "1. **Be Respectful** - Treat everyone with respect. No harassment or hate speech.\n"
        "2. **No Spamming** - Avoid excessive messages or disruptive content.\n"
        "3. **Stay On Topic** - Keep discussions relevant to the channel.\n"
        "4. **Follow Discord TOS** - Ensure your actions align with Discord's Terms of Service."
    ),
    "bye": "Goodbye, cruel world!",
    "triforce": "\u200c \u200c  \u25b2\n\u25b2\u200c \u25b2",
}

# User-visible messages
DEFAULT_CREATED_MESSAGE = (
    "Default config file created. CustomCommands.config.json can be edited "
    "in a text editor as well. Have fun!"
)
LOAD_FAILED_MESSAGE = "Failed to load commands from file."
CREATE_FAILED_MESSAGE = "Failed to create default config."
SAVE_FAILED_MESSAGE = "Failed to save commands."
PREFIX_SAVED_MESSAGE = "Prefix updated successfully!"
COMMANDS_SAVED_MESSAGE = "Commands saved successfully!"
COMMAND_DELETED_MESSAGE = "Command deleted!"

Notifier = Callable[[str, str], None]


def is_valid_prefix(prefix: str) -> bool:
    """A prefix must be non-empty and must not contain whitespace."""
    return bool(prefix) and not any(c.isspace() for c in prefix)


def is_valid_command_name(name: str) -> bool:
    """Command names are a single token: non-empty, no whitespace."""
    return bool(name) and not any(c.isspace() for c in name)


class Config(BaseModel):
    """Custom command settings."""

    model_config = {"extra": "ignore"}

    prefix: str = Field(
        default=DEFAULT_PREFIX,
        description="String a message must start with to trigger a custom command"
    )
    commands: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_COMMANDS),
        description="Command name -> response text"
    )

    @field_validator("prefix")
    @classmethod
    def _prefix_is_token(cls, value: str) -> str:
        if not is_valid_prefix(value):
            raise ValueError("prefix must be non-empty and contain no whitespace")
        return value

    def get_response(self, name: str) -> str | None:
        """Look up a command response by exact name."""
        return self.commands.get(name)


def _log_notify(title: str, body: str) -> None:
    logger.info(f"{title}: {body}")


class ConfigManager:
    """Manages loading and saving the custom command config.

    Every user edit goes through one of the edit methods, which mutate the
    in-memory config first and then write the whole document. A failed write
    is reported through ``notify`` and leaves memory ahead of disk.
    """

    def __init__(self, config_file: Path, notify: Optional[Notifier] = None):
        self.config_file = Path(config_file)
        self._notify = notify or _log_notify
        self._config: Config = Config()

    @property
    def config(self) -> Config:
        """The in-memory config."""
        return self._config

    def load(self) -> Config:
        """Load configuration from file.

        A missing file is replaced with the default document. A malformed
        file is reported once and the current in-memory config is kept.

        Returns:
            The in-memory Config after loading.
        """
        if not self.config_file.exists():
            self._create_default_config()
            return self._config

        try:
            self._config = self._read()
            logger.debug(f"Loaded {len(self._config.commands)} commands from {self.config_file}")
        except ConfigLoadError as e:
            logger.error(str(e))
            self._notify("Error", LOAD_FAILED_MESSAGE)

        return self._config

    def _read(self) -> Config:
        """Parse the config file and merge it over the in-memory config.

        Raises:
            ConfigLoadError: If the file cannot be read, is not a JSON object,
                or fails validation.
        """
        try:
            data = json.loads(self.config_file.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("config root must be an object")
            return Config.model_validate({**self._config.model_dump(), **data})
        except (OSError, ValidationError, ValueError) as e:
            raise ConfigLoadError(f"Invalid config file {self.config_file}: {e}") from e

    def _create_default_config(self) -> None:
        """Write the default config document and tell the user about it."""
        self._config = Config()
        try:
            self._write()
        except ConfigSaveError as e:
            logger.error(f"Could not create default config: {e}")
            self._notify("Error", CREATE_FAILED_MESSAGE)
            return
        self._notify("Custom Commands", DEFAULT_CREATED_MESSAGE)

    def _write(self) -> None:
        """Serialize the full config as pretty-printed UTF-8 JSON."""
        data = json.dumps(self._config.model_dump(), indent=2, ensure_ascii=False)
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(data, encoding="utf-8")
        except OSError as e:
            raise ConfigSaveError(f"Could not write {self.config_file}: {e}") from e

    def save(self, success_message: str = COMMANDS_SAVED_MESSAGE) -> bool:
        """Save the in-memory config to file.

        Args:
            success_message: Message shown to the user on success.

        Returns:
            True if the file was written.
        """
        try:
            self._write()
        except ConfigSaveError as e:
            logger.error(str(e))
            self._notify("Error", SAVE_FAILED_MESSAGE)
            return False
        self._notify("Success", success_message)
        return True

    def set_prefix(self, prefix: str) -> bool:
        """Change the command prefix and save.

        Raises:
            ConfigValidationError: If prefix is empty or contains whitespace.
        """
        if not is_valid_prefix(prefix):
            raise ConfigValidationError(f"Invalid prefix {prefix!r}: must be non-empty with no whitespace")
        self._config.prefix = prefix
        return self.save(PREFIX_SAVED_MESSAGE)

    def replace_commands(self, commands: dict[str, str]) -> bool:
        """Replace the whole command table and save.

        Raises:
            ConfigValidationError: If a command name is empty or contains whitespace.
        """
        invalid = [name for name in commands if not is_valid_command_name(name)]
        if invalid:
            raise ConfigValidationError(f"Invalid command names: {invalid}")
        self._config.commands = dict(commands)
        return self.save(COMMANDS_SAVED_MESSAGE)

    def remove_command(self, name: str) -> bool:
        """Delete a command and save.

        Returns:
            False if the command did not exist or the save failed.
        """
        if name not in self._config.commands:
            return False
        del self._config.commands[name]
        return self.save(COMMAND_DELETED_MESSAGE)

    def list_commands(self) -> list[tuple[str, str]]:
        """Commands in display (insertion) order."""
        return list(self._config.commands.items())

    def to_dict(self) -> dict[str, Any]:
        return self._config.model_dump()
