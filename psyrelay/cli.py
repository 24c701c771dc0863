"""Process entry point -- load settings, authenticate, and run the update loop."""

from __future__ import annotations

import asyncio
import logging
import sys

from telegram import Bot
from telegram.error import Forbidden, InvalidToken

from .config.settings import Settings
from .errors import ConfigLoadError, CredentialError
from .messaging.bot import RelayBot
from .messaging.commands import CommandDispatcher
from .messaging.transport import TelegramTransport
from .services.qa_client import QAClient

logger = logging.getLogger(__name__)


async def authorize(bot: Bot, settings: Settings) -> Settings:
    """Check the token with ``getMe`` and fill in the bot username if unset."""
    try:
        await bot.initialize()
        me = await bot.get_me()
    except (InvalidToken, Forbidden) as exc:
        raise CredentialError(f"Telegram rejected the bot token: {exc}") from exc
    logger.info("Authorized on account %s", me.username)
    if not settings.bot_username:
        settings = settings.with_bot_username(me.username or "")
    return settings


async def _main(settings: Settings) -> None:
    bot = Bot(settings.telegram_token)
    try:
        settings = await authorize(bot, settings)
        dispatcher = CommandDispatcher(
            settings,
            TelegramTransport(bot),
            QAClient(settings.qa_base_url, model=settings.qa_model, timeout=settings.qa_timeout),
        )
        await RelayBot(bot, dispatcher, poll_timeout=settings.poll_timeout).run()
    finally:
        await bot.shutdown()


def main() -> None:
    try:
        settings = Settings.from_env()
    except ConfigLoadError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Configuration error: %s", exc)
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
    )
    # httpx logs every long-poll request at INFO.
    logging.getLogger("httpx").setLevel(logging.DEBUG if settings.debug else logging.WARNING)
    logger.info("Starting relay: %r", settings)

    try:
        asyncio.run(_main(settings))
    except CredentialError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
