"""
Core module for the command_center package.

Provides the shared data models and exception hierarchy.
"""

from command_center.core.datamodels import (
    BUILT_IN_APPLICATION_ID,
    CommandContext,
    CommandOption,
    CommandType,
    InputType,
    OptionType,
    OptionValue,
    OutgoingMessage,
    SlashCommand,
    User,
)
from command_center.core.exceptions import (
    CommandCenterError,
    CommandError,
    CommandNotFoundError,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    ConfigValidationError,
    InvalidDelayError,
    LookupFailedError,
)

__all__ = [
    # Models
    "BUILT_IN_APPLICATION_ID",
    "CommandContext",
    "CommandOption",
    "CommandType",
    "InputType",
    "OptionType",
    "OptionValue",
    "OutgoingMessage",
    "SlashCommand",
    "User",
    # Exceptions
    "CommandCenterError",
    "CommandError",
    "CommandNotFoundError",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSaveError",
    "ConfigValidationError",
    "InvalidDelayError",
    "LookupFailedError",
]
