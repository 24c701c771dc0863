"""Application settings -- reads from environment and ``.env`` file.

All configuration is consolidated here and loaded once at startup into an
immutable :class:`Settings` value that is handed to the dispatcher.
"""

from __future__ import annotations

import base64
import binascii
import os
from dataclasses import dataclass, replace

from ..errors import ConfigLoadError
from ..util.env_file import EnvFile

DEFAULT_THINKING_TEXT = "PsyAI is thinking..."
DEFAULT_QA_MODEL = "openai"
DEFAULT_QA_TIMEOUT = 300.0
DEFAULT_POLL_TIMEOUT = 60


@dataclass(frozen=True)
class Settings:
    """Runtime configuration sourced from environment variables and ``.env``."""

    telegram_token: str
    start_text: str
    qa_base_url: str
    bot_username: str = ""
    thinking_text: str = DEFAULT_THINKING_TEXT
    qa_model: str = DEFAULT_QA_MODEL
    qa_timeout: float = DEFAULT_QA_TIMEOUT
    poll_timeout: int = DEFAULT_POLL_TIMEOUT
    debug: bool = False

    @classmethod
    def from_env(cls, env: EnvFile | None = None) -> Settings:
        """Build settings, raising :class:`ConfigLoadError` on bad input.

        The ``.env`` path comes from ``DOTENV_PATH`` (default ``.env`` in
        the working directory); values there win over the process
        environment.
        """
        if env is None:
            env = EnvFile(os.getenv("DOTENV_PATH") or ".env")

        def e(key: str) -> str:
            return env.read(key) or os.getenv(key, "")

        return cls(
            telegram_token=_required(e, "TELETOKEN"),
            start_text=_decode_base64("START_TEXT", _required(e, "START_TEXT")),
            qa_base_url=_required(e, "BASE_URL_BETA").rstrip("/"),
            bot_username=e("BOT_USERNAME").lstrip("@"),
            thinking_text=e("THINKING_TEXT") or DEFAULT_THINKING_TEXT,
            qa_model=e("QA_MODEL") or DEFAULT_QA_MODEL,
            qa_timeout=_number(e, "QA_TIMEOUT", float, DEFAULT_QA_TIMEOUT),
            poll_timeout=_number(e, "POLL_TIMEOUT", int, DEFAULT_POLL_TIMEOUT),
            debug=e("BOT_DEBUG").lower() in ("1", "true", "yes"),
        )

    def with_bot_username(self, username: str) -> Settings:
        return replace(self, bot_username=username.lstrip("@"))

    def __repr__(self) -> str:
        return (
            f"Settings(qa_base_url={self.qa_base_url!r}, "
            f"bot_username={self.bot_username!r}, qa_model={self.qa_model!r}, "
            f"debug={self.debug})"
        )


# -- helpers -----------------------------------------------------------


def _required(e, key: str) -> str:
    value = e(key)
    if not value:
        raise ConfigLoadError(f"{key} is not set")
    return value


def _decode_base64(key: str, raw: str) -> str:
    try:
        return base64.b64decode(raw, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ConfigLoadError(f"{key} is not valid base64 UTF-8 text: {exc}") from exc


def _number(e, key: str, kind: type, default):
    raw = e(key)
    if not raw:
        return default
    try:
        return kind(raw)
    except ValueError as exc:
        raise ConfigLoadError(f"{key} must be a number, got {raw!r}") from exc
