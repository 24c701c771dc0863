"""Telegram messaging pipeline -- update loop, dispatcher, transport, and formatting."""

from .bot import RelayBot
from .commands import CommandDispatcher, classify
from .formatting import markdown_to_telegram_html
from .mentions import delete_mention
from .models import InboundMessage
from .transport import TelegramTransport

__all__ = [
    "CommandDispatcher",
    "InboundMessage",
    "RelayBot",
    "TelegramTransport",
    "classify",
    "delete_mention",
    "markdown_to_telegram_html",
]
