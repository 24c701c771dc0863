"""Outbound service clients."""

from .qa_client import AnswerPayload, PromptRequest, QAClient

__all__ = ["AnswerPayload", "PromptRequest", "QAClient"]
