"""
Exception classes for Command Center.
"""


class CommandCenterError(Exception):
    """Base exception for Command Center errors."""


class ConfigError(CommandCenterError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Config file could not be read or parsed."""


class ConfigSaveError(ConfigError):
    """Config file could not be written."""


class ConfigValidationError(ConfigError):
    """Config content is invalid (e.g. empty prefix)."""


class LookupFailedError(CommandCenterError):
    """An external lookup returned an unusable response."""


class InvalidDelayError(CommandCenterError):
    """Reminder delay token could not be parsed."""


class CommandError(CommandCenterError):
    """Base exception for slash command errors."""


class CommandNotFoundError(CommandError):
    """Slash command not found in registry."""
