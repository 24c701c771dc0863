"""Command classification and dispatch.

Every inbound message lands in exactly one branch: ``/start`` greets,
``/info`` echoes its argument, and anything else is a question for the
Q&A service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Union

from ..config.settings import Settings
from .formatting import markdown_to_telegram_html
from .mentions import delete_mention, mentions_bot
from .models import InboundMessage
from .transport import RenderMode, Transport

logger = logging.getLogger(__name__)


class AnswerSource(Protocol):
    async def ask(self, question: str) -> str: ...


@dataclass(frozen=True)
class Greeting:
    pass


@dataclass(frozen=True)
class Lookup:
    argument: str


@dataclass(frozen=True)
class Ask:
    question: str


Action = Union[Greeting, Lookup, Ask]


def classify(message: InboundMessage) -> Action:
    if message.command == "start":
        return Greeting()
    if message.command == "info":
        return Lookup(argument=message.argument)
    return Ask(question=message.text)


class CommandDispatcher:
    def __init__(self, settings: Settings, transport: Transport, answers: AnswerSource) -> None:
        self._settings = settings
        self._transport = transport
        self._answers = answers

    @property
    def settings(self) -> Settings:
        return self._settings

    async def dispatch(self, message: InboundMessage) -> None:
        action = classify(message)
        if isinstance(action, Greeting):
            await self._cmd_start(message)
        elif isinstance(action, Lookup):
            await self._cmd_info(message, action.argument)
        else:
            await self._cmd_ask(message, action.question)

    async def _cmd_start(self, message: InboundMessage) -> None:
        await self._transport.send_message(
            message.chat_id, self._settings.start_text, RenderMode.MARKDOWN,
        )

    async def _cmd_info(self, message: InboundMessage, argument: str) -> None:
        logger.info("Info lookup in chat %s: %s", message.chat_id, argument)
        await self._transport.send_message(message.chat_id, argument, RenderMode.HTML)

    async def _cmd_ask(self, message: InboundMessage, question: str) -> None:
        if message.is_group and not mentions_bot(
            message.text, message.entities, self._settings.bot_username,
        ):
            return

        await self._transport.send_typing(message.chat_id)
        thinking_id = await self._transport.send_message(
            message.chat_id, self._settings.thinking_text, reply_to=message.message_id,
        )

        question = delete_mention(question, message.entities)
        answer = await self._answers.ask(question)

        await self._transport.edit_message(
            message.chat_id, thinking_id, markdown_to_telegram_html(answer), RenderMode.HTML,
        )
