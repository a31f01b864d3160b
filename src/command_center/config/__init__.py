"""Configuration management for Command Center."""

from command_center.config.config import (
    COMMAND_DELETED_MESSAGE,
    COMMANDS_SAVED_MESSAGE,
    CONFIG_FILENAME,
    CREATE_FAILED_MESSAGE,
    DEFAULT_COMMANDS,
    DEFAULT_CREATED_MESSAGE,
    DEFAULT_PREFIX,
    LOAD_FAILED_MESSAGE,
    PREFIX_SAVED_MESSAGE,
    SAVE_FAILED_MESSAGE,
    Config,
    ConfigManager,
    is_valid_command_name,
    is_valid_prefix,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_COMMANDS",
    "DEFAULT_PREFIX",
    "Config",
    "ConfigManager",
    "is_valid_command_name",
    "is_valid_prefix",
    # User-visible messages
    "COMMAND_DELETED_MESSAGE",
    "COMMANDS_SAVED_MESSAGE",
    "CREATE_FAILED_MESSAGE",
    "DEFAULT_CREATED_MESSAGE",
    "LOAD_FAILED_MESSAGE",
    "PREFIX_SAVED_MESSAGE",
    "SAVE_FAILED_MESSAGE",
]
