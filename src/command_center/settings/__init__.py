"""Settings panel for editing custom commands."""

from command_center.settings.panel import (
    Button,
    CommandRow,
    SettingsPanel,
    TextArea,
    TextField,
    render_settings_panel,
)

__all__ = [
    "Button",
    "CommandRow",
    "SettingsPanel",
    "TextArea",
    "TextField",
    "render_settings_panel",
]
