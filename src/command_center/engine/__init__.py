"""Message rewrite engine and reminder scheduling."""

from command_center.engine.reminders import (
    Reminder,
    ReminderScheduler,
    format_reminder,
    parse_delay,
    thread_timer,
)
from command_center.engine.rewrite import CommandRewriter, split_command

__all__ = [
    "CommandRewriter",
    "split_command",
    "Reminder",
    "ReminderScheduler",
    "format_reminder",
    "parse_delay",
    "thread_timer",
]
