"""Exception hierarchy shared across the relay."""

from __future__ import annotations


class RelayError(Exception):
    """Base class for every error the relay raises on purpose."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigLoadError(RelayError):
    """A required setting is missing or cannot be decoded."""


class CredentialError(RelayError):
    """Telegram rejected the bot token."""


class TransportSendError(RelayError):
    """A send, edit or chat-action call to Telegram failed."""


class RemoteRequestError(RelayError):
    """The Q&A service could not be reached or returned an unusable body."""


class ResponseFormatError(RemoteRequestError):
    """The Q&A response has no string ``assistant`` field."""


class BoundsError(RelayError):
    """An entity range falls outside the message text."""
