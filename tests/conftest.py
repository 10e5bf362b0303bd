"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import typing as typ

import pytest

from herald.config import NotifierConfig
from tests.helpers.webhook import WEBHOOK_URL, RecordingWebhook

_HERALD_ENV_VARS = (
    "HERALD_WEBHOOK_URL",
    "DISCORD_WEBHOOK_URL",
    "HERALD_USERNAME",
    "HERALD_AVATAR_URL",
    "HERALD_ACTOR_ICON_TEMPLATE",
    "HERALD_SKIP_TOKEN",
    "HERALD_FIELD_CHAR_LIMIT",
    "HERALD_MAX_LISTED_COMMITS",
    "HERALD_LOG_LEVEL",
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "GITHUB_SERVER_URL",
    "GITHUB_ACTOR",
    "GITHUB_REF_NAME",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide runner and Herald variables so tests start from defaults."""
    for name in _HERALD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def webhook() -> RecordingWebhook:
    """Provide a webhook recorder that accepts every request with 204."""
    return RecordingWebhook()


@pytest.fixture
def enabled_config() -> NotifierConfig:
    """Provide configuration pointing at the recording webhook URL."""
    return NotifierConfig(webhook_url=WEBHOOK_URL)


class FakeLogger:
    """Collects femtologging-style log calls for assertions."""

    def __init__(self) -> None:
        """Initialise an empty call list."""
        self.calls: list[tuple[str, str, object | None, bool]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str:
        """Record the call and echo the message."""
        self.calls.append((level, message, exc_info, stack_info))
        return message

    def messages(self, level: str) -> list[str]:
        """Return messages logged at ``level``."""
        return [message for lvl, message, _, _ in self.calls if lvl == level]


@pytest.fixture
def fake_logger_factory(
    monkeypatch: pytest.MonkeyPatch,
) -> typ.Callable[[str], FakeLogger]:
    """Return a callable that swaps a module's ``logger`` for a FakeLogger."""

    def _install(module_path: str) -> FakeLogger:
        fake = FakeLogger()
        monkeypatch.setattr(f"{module_path}.logger", fake)
        return fake

    return _install
