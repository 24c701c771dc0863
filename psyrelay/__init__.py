"""psyrelay -- Telegram relay for the PsyAI question-answering service."""

__version__ = "0.1.0"
