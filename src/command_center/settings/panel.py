"""
Settings panel for custom commands.

The panel is a tree of plain control models. A host UI renders it and
forwards user input by setting ``value`` on fields and calling ``click()``
on buttons; every write goes through the ConfigManager.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from command_center.config import ConfigManager, is_valid_command_name
from command_center.core.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


@dataclass
class TextField:
    """Single-line text input."""

    label: str
    value: str = ""


@dataclass
class TextArea:
    """Multi-line text input."""

    label: str
    value: str = ""


@dataclass
class Button:
    """A clickable button."""

    text: str
    on_click: Optional[Callable[[], None]] = field(default=None, repr=False)

    def click(self) -> None:
        if self.on_click is not None:
            self.on_click()


@dataclass(eq=False)
class CommandRow:
    """Name/response editor for one command.

    ``original_name`` is None for rows added in the panel and not saved yet.
    """

    name: TextField
    response: TextArea
    remove_button: Button
    original_name: Optional[str] = None


@dataclass
class SettingsPanel:
    """Controls for editing the prefix and the command table."""

    manager: ConfigManager = field(repr=False)
    prefix: TextField = field(default_factory=lambda: TextField("Command Prefix:"))
    save_prefix_button: Button = field(default_factory=lambda: Button("Save Prefix"))
    rows: list[CommandRow] = field(default_factory=list)
    add_command_button: Button = field(default_factory=lambda: Button("Add Command"))
    save_commands_button: Button = field(default_factory=lambda: Button("Save Commands"))

    def __post_init__(self):
        self.save_prefix_button.on_click = self.save_prefix
        self.add_command_button.on_click = self.add_command
        self.save_commands_button.on_click = self.save_commands

    def save_prefix(self) -> bool:
        """Persist the prefix field. An empty prefix is ignored."""
        try:
            return self.manager.set_prefix(self.prefix.value)
        except ConfigValidationError:
            return False

    def add_row(self, name: str = "", response: str = "", original_name: Optional[str] = None) -> CommandRow:
        label = "Command:" if original_name is not None else "New Command:"
        row = CommandRow(
            name=TextField(label, name),
            response=TextArea("Response:", response),
            remove_button=Button("×"),
            original_name=original_name,
        )
        row.remove_button.on_click = lambda: self.remove_row(row)
        self.rows.append(row)
        return row

    def add_command(self) -> None:
        self.add_row()

    def remove_row(self, row: CommandRow) -> None:
        """Drop a row. Rows backed by a saved command delete it immediately."""
        if row in self.rows:
            self.rows.remove(row)
        if row.original_name is not None:
            self.manager.remove_command(row.original_name)

    def collect_commands(self) -> dict[str, str]:
        """Rows with a single-token name and a non-empty response, in panel order."""
        commands: dict[str, str] = {}
        for row in self.rows:
            name = row.name.value.strip()
            response = row.response.value.strip()
            if not name or not response:
                continue
            if not is_valid_command_name(name):
                logger.warning(f"Skipping command {name!r}: names cannot contain whitespace")
                continue
            commands[name] = response
        return commands

    def save_commands(self) -> bool:
        """Replace the command table with the panel contents."""
        commands = self.collect_commands()
        saved = self.manager.replace_commands(commands)
        for row in self.rows:
            name = row.name.value.strip()
            if name in commands:
                row.original_name = name
        return saved


def render_settings_panel(manager: ConfigManager) -> SettingsPanel:
    """Build a settings panel populated from the current config."""
    config = manager.config
    panel = SettingsPanel(manager=manager)
    panel.prefix.value = config.prefix
    for name, response in manager.list_commands():
        panel.add_row(name, response, original_name=name)
    return panel
