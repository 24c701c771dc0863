"""Long-poll update loop -- feeds Telegram messages to the dispatcher one at a time."""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta

from telegram import Bot, Update
from telegram.error import RetryAfter, TelegramError

from ..errors import RelayError
from .commands import CommandDispatcher
from .models import InboundMessage

logger = logging.getLogger(__name__)

RETRY_DELAY = 3.0


class RelayBot:
    def __init__(self, bot: Bot, dispatcher: CommandDispatcher, poll_timeout: int = 60) -> None:
        self._bot = bot
        self._dispatcher = dispatcher
        self._poll_timeout = poll_timeout
        self._offset = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    async def run(self) -> None:
        self._running = True
        logger.info("Polling for updates (timeout=%ds)", self._poll_timeout)
        while self._running:
            try:
                updates = await self._bot.get_updates(
                    offset=self._offset,
                    timeout=self._poll_timeout,
                    allowed_updates=[Update.MESSAGE],
                )
            except RetryAfter as exc:
                delay = _seconds(exc.retry_after)
                logger.warning("Flood control on getUpdates; retrying in %.0fs", delay)
                await asyncio.sleep(delay)
                continue
            except TelegramError as exc:
                logger.warning("Failed to get updates: %s; retrying in %.0fs", exc, RETRY_DELAY)
                await asyncio.sleep(RETRY_DELAY)
                continue

            for update in updates:
                self._offset = update.update_id + 1
                await self.handle_update(update)
                if not self._running:
                    break

    async def handle_update(self, update: Update) -> None:
        if update.message is None:
            return
        message = InboundMessage.from_telegram(update.message)
        try:
            await self._dispatcher.dispatch(message)
        except RelayError as exc:
            logger.error("Error handling command '%s': %s", message.command, exc)


def _seconds(value: float | timedelta) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)
