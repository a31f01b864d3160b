"""
Shared fixtures: an in-memory host, fake timers and a mocked HTTP client.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import httpx
import pytest

from command_center.core.datamodels import OutgoingMessage, SlashCommand, User
from command_center.plugin import CommandCenterPlugin


class FakeHost:
    """In-memory chat client implementing the Host protocol."""

    def __init__(self, plugin_folder: Path):
        self.plugin_folder = plugin_folder
        self.sent: list[tuple[str, str]] = []
        self.alerts: list[tuple[str, str]] = []
        self.users: dict[str, User] = {}
        self.selected_channel_id: str | None = "chan-1"
        self.builtin_commands: list[SlashCommand] = []
        self._lookup_patches: dict[str, list[Callable]] = {}
        self._send_patches: dict[str, list[Callable]] = {}

    # Host protocol

    def send_message(self, channel_id, message):
        for callbacks in list(self._send_patches.values()):
            for callback in callbacks:
                result = callback(channel_id, message)
                if result is not None:
                    channel_id, message = result
        self.sent.append((channel_id, message.content))

    def get_user(self, user_id):
        return self.users.get(user_id)

    def get_selected_channel_id(self):
        return self.selected_channel_id

    def alert(self, title, body):
        self.alerts.append((title, body))

    def patch_command_lookup(self, owner, callback):
        self._lookup_patches.setdefault(owner, []).append(callback)

    def patch_send_message(self, owner, callback):
        self._send_patches.setdefault(owner, []).append(callback)

    def unpatch_all(self, owner):
        self._lookup_patches.pop(owner, None)
        self._send_patches.pop(owner, None)

    # Test helpers

    def list_commands(self) -> list[SlashCommand]:
        result = list(self.builtin_commands)
        for callbacks in self._lookup_patches.values():
            for callback in callbacks:
                callback(result)
        return result

    def user_send(self, channel_id: str, content: str) -> str:
        """Simulate the user sending a message; returns what was sent."""
        self.send_message(channel_id, OutgoingMessage(content=content))
        return self.sent[-1][1]

    def add_user(self, user_id: str, avatar: str = "abc123", username: str = "someone") -> User:
        user = User(id=user_id, username=username, avatar=avatar)
        self.users[user_id] = user
        return user


class FakeTimer:
    """Timer that only fires when told to."""

    def __init__(self, interval: float, callback: Callable[[], None]):
        self.interval = interval
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.callback()


class FakeTimerFactory:
    def __init__(self):
        self.timers: list[FakeTimer] = []

    def __call__(self, interval, callback):
        timer = FakeTimer(interval, callback)
        self.timers.append(timer)
        return timer


class MockAPI:
    """Routes requests by host to canned JSON responses."""

    def __init__(self):
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def json(self, host: str, payload, status_code: int = 200) -> None:
        self.routes[host] = lambda request: httpx.Response(status_code, json=payload)

    def fail(self, host: str) -> None:
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)
        self.routes[host] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.host)
        if route is None:
            return httpx.Response(404, json={"error": "no route"})
        return route(request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def host(tmp_path):
    return FakeHost(tmp_path / "plugins")


@pytest.fixture
def timers():
    return FakeTimerFactory()


@pytest.fixture
def api():
    return MockAPI()


@pytest.fixture
def http_client(api):
    client = api.client()
    yield client
    client.close()


@pytest.fixture
def plugin(host, http_client, timers):
    """A started plugin wired to fakes."""
    p = CommandCenterPlugin(host, http_client=http_client, timer_factory=timers)
    p.start()
    host.alerts.clear()  # drop the "default config created" notice
    yield p
    p.stop()
