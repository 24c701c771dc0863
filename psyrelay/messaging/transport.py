"""Outbound Telegram calls behind a small protocol the dispatcher can mock."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from telegram import Bot, ReplyParameters
from telegram.constants import ChatAction
from telegram.error import TelegramError

from ..errors import TransportSendError

logger = logging.getLogger(__name__)


class RenderMode(str, Enum):
    MARKDOWN = "Markdown"
    HTML = "HTML"


class Transport(Protocol):
    async def send_message(
        self,
        chat_id: int,
        text: str,
        parse_mode: RenderMode | None = None,
        reply_to: int | None = None,
    ) -> int: ...

    async def edit_message(
        self, chat_id: int, message_id: int, text: str, parse_mode: RenderMode | None = None,
    ) -> None: ...

    async def send_typing(self, chat_id: int) -> None: ...


class TelegramTransport:
    """:class:`Transport` over a python-telegram-bot :class:`~telegram.Bot`."""

    def __init__(self, bot: Bot) -> None:
        self._bot = bot

    async def send_message(
        self,
        chat_id: int,
        text: str,
        parse_mode: RenderMode | None = None,
        reply_to: int | None = None,
    ) -> int:
        try:
            sent = await self._bot.send_message(
                chat_id=chat_id,
                text=text,
                parse_mode=parse_mode.value if parse_mode else None,
                reply_parameters=ReplyParameters(message_id=reply_to) if reply_to else None,
            )
        except TelegramError as exc:
            raise TransportSendError(f"sendMessage to chat {chat_id} failed: {exc}") from exc
        return sent.message_id

    async def edit_message(
        self, chat_id: int, message_id: int, text: str, parse_mode: RenderMode | None = None,
    ) -> None:
        try:
            await self._bot.edit_message_text(
                text=text,
                chat_id=chat_id,
                message_id=message_id,
                parse_mode=parse_mode.value if parse_mode else None,
            )
        except TelegramError as exc:
            raise TransportSendError(
                f"editMessageText {message_id} in chat {chat_id} failed: {exc}"
            ) from exc

    async def send_typing(self, chat_id: int) -> None:
        try:
            await self._bot.send_chat_action(chat_id=chat_id, action=ChatAction.TYPING)
        except TelegramError as exc:
            logger.debug("Typing indicator for chat %s failed: %s", chat_id, exc)
