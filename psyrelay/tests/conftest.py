"""Shared pytest fixtures for psyrelay tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from psyrelay.config.settings import Settings
from psyrelay.messaging.models import Entity, InboundMessage, UserRef

_ENV_KEYS = (
    "TELETOKEN",
    "START_TEXT",
    "BASE_URL_BETA",
    "BOT_USERNAME",
    "THINKING_TEXT",
    "QA_MODEL",
    "QA_TIMEOUT",
    "POLL_TIMEOUT",
    "BOT_DEBUG",
)


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    dotenv = tmp_path / ".env"
    monkeypatch.setenv("DOTENV_PATH", str(dotenv))
    return dotenv


@pytest.fixture()
def dotenv_path(_isolate_env: Path) -> Path:
    return _isolate_env


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        telegram_token="123:abc",
        start_text="*Welcome* to PsyAI",
        qa_base_url="http://qa.test",
        bot_username="doseslog_bot",
    )


@pytest.fixture()
def transport() -> AsyncMock:
    t = AsyncMock()
    t.send_message.return_value = 42
    return t


@pytest.fixture()
def answers() -> AsyncMock:
    a = AsyncMock()
    a.ask.return_value = "plain answer"
    return a


def mention(offset: int, length: int, username: str | None = None) -> Entity:
    user = UserRef(username=username) if username else None
    return Entity(type="mention", offset=offset, length=length, user=user)


def make_message(
    text: str = "hello",
    *,
    chat_type: str = "private",
    entities: tuple[Entity, ...] = (),
    command: str = "",
    argument: str = "",
) -> InboundMessage:
    return InboundMessage(
        chat_id=1001,
        chat_type=chat_type,
        message_id=7,
        text=text,
        entities=entities,
        command=command,
        argument=argument,
    )
