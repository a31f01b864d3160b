"""
One-shot reminders delivered to a channel after a delay.
"""

from __future__ import annotations

import logging
import re
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol

from command_center.core.exceptions import InvalidDelayError

logger = logging.getLogger(__name__)

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE

UNIT_MS = {
    "m": MS_PER_MINUTE,
    "h": MS_PER_HOUR,
}

INVALID_FORMAT_MESSAGE = "Invalid time format. Use '10m' for minutes or '1h' for hours."
INVALID_UNIT_MESSAGE = "Invalid time unit. Use 'm' for minutes or 'h' for hours."
DELAY_TOO_LONG_MESSAGE = "That reminder is too far in the future."

# Longest delay a timer thread can wait, with headroom for the monotonic clock
MAX_DELAY_MS = int(threading.TIMEOUT_MAX // 2) * 1000

_DELAY_RE = re.compile(r"^(\d+)([A-Za-z]+)$")


def parse_delay(token: str) -> tuple[int, str, int]:
    """Parse a delay token such as "10m" or "1h".

    Args:
        token: ``<number><unit>``, unit ``m`` (minutes) or ``h`` (hours)

    Returns:
        Tuple of (amount, unit, delay in milliseconds)

    Raises:
        InvalidDelayError: On a bad format, an unknown unit, or a delay
            longer than MAX_DELAY_MS.

    Example:
        >>> parse_delay("10m")
        (10, 'm', 600000)
    """
    match = _DELAY_RE.match(token.strip())
    if not match:
        raise InvalidDelayError(INVALID_FORMAT_MESSAGE)

    amount = int(match.group(1))
    unit = match.group(2)
    if unit not in UNIT_MS:
        raise InvalidDelayError(INVALID_UNIT_MESSAGE)

    delay_ms = amount * UNIT_MS[unit]
    if delay_ms > MAX_DELAY_MS:
        raise InvalidDelayError(DELAY_TOO_LONG_MESSAGE)

    return amount, unit, delay_ms


def format_reminder(user_id: str, message: str) -> str:
    return f"<@{user_id}>, reminder: {message}"


class TimerHandle(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


# (delay in seconds, callback) -> unstarted timer
TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def thread_timer(interval: float, callback: Callable[[], None]) -> TimerHandle:
    """Default timer: a daemon threading.Timer so pending reminders never block exit."""
    timer = threading.Timer(interval, callback)
    timer.daemon = True
    return timer


@dataclass(eq=False)
class Reminder:
    """A pending reminder."""

    user_id: str
    channel_id: str | None
    message: str
    delay_ms: int
    fire_at: float = field(default=0.0)
    timer: TimerHandle | None = field(default=None, repr=False)


class ReminderScheduler:
    """Schedules reminders.

    Several reminders for the same user are all kept and each fires on its
    own. There is no cancellation; pending reminders die with the process.
    """

    def __init__(
        self,
        send: Callable[[str, str], None],
        timer_factory: TimerFactory | None = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            send: Delivers (channel_id, content) to the chat
            timer_factory: Creates the deferred callback (default: thread_timer)
            clock: Wall clock in seconds, used for fire_at
        """
        self._send = send
        self._timer_factory = timer_factory or thread_timer
        self._clock = clock
        self._reminders: dict[str, list[Reminder]] = {}
        self._lock = threading.Lock()

    def set_reminder(
        self,
        user_id: str,
        delay_ms: int,
        message: str,
        channel_id: str | None,
    ) -> Reminder:
        """Arm a reminder that fires after delay_ms.

        Raises:
            InvalidDelayError: If delay_ms is negative or above MAX_DELAY_MS.
        """
        if delay_ms < 0:
            raise InvalidDelayError(INVALID_FORMAT_MESSAGE)
        if delay_ms > MAX_DELAY_MS:
            raise InvalidDelayError(DELAY_TOO_LONG_MESSAGE)

        reminder = Reminder(
            user_id=user_id,
            channel_id=channel_id,
            message=message,
            delay_ms=delay_ms,
            fire_at=self._clock() + delay_ms / 1000,
        )
        reminder.timer = self._timer_factory(delay_ms / 1000, lambda: self._fire(reminder))

        with self._lock:
            self._reminders.setdefault(user_id, []).append(reminder)

        reminder.timer.start()
        logger.info(f"Reminder set for user {user_id} in {delay_ms} ms")
        return reminder

    def _fire(self, reminder: Reminder) -> None:
        try:
            self.send_reminder(reminder.user_id, reminder.message, reminder.channel_id)
        except Exception as e:
            logger.error(f"Failed to deliver reminder for user {reminder.user_id}: {e}")
        finally:
            self._forget(reminder)

    def _forget(self, reminder: Reminder) -> None:
        with self._lock:
            pending = self._reminders.get(reminder.user_id, [])
            if reminder in pending:
                pending.remove(reminder)
            if not pending:
                self._reminders.pop(reminder.user_id, None)

    def send_reminder(self, user_id: str, message: str, channel_id: str | None) -> None:
        """Deliver a reminder now. Skipped silently without a channel."""
        if not channel_id:
            logger.debug(f"Reminder for user {user_id} dropped: no channel")
            return
        self._send(channel_id, format_reminder(user_id, message))

    def pending(self, user_id: str) -> list[Reminder]:
        """Pending reminders for a user, oldest first."""
        with self._lock:
            return list(self._reminders.get(user_id, []))
