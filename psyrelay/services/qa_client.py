"""Client for the remote PsyAI question-answering service."""

from __future__ import annotations

import asyncio
import logging

import aiohttp
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from ..errors import RemoteRequestError, ResponseFormatError

logger = logging.getLogger(__name__)


class PromptRequest(BaseModel):
    question: str = Field(description="User question with the bot mention removed.")
    temperature: float = Field(default=0.25, description="Sampling temperature.")
    tokens: int = Field(default=1000, description="Maximum answer length in tokens.")


class AnswerPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    assistant: StrictStr = Field(description="Answer text in lightweight markup.")


class QAClient:
    """Posts a question to ``{base_url}/prompt`` and returns the answer text."""

    def __init__(
        self,
        base_url: str,
        model: str = "openai",
        timeout: float = 300.0,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session

    @property
    def url(self) -> str:
        return f"{self._base_url}/prompt"

    async def ask(self, question: str) -> str:
        body = PromptRequest(question=question).model_dump()
        logger.debug("POST %s model=%s question=%r", self.url, self._model, question[:80])
        if self._session is not None:
            data = await self._post(self._session, body)
        else:
            async with aiohttp.ClientSession() as session:
                data = await self._post(session, body)

        try:
            return AnswerPayload.model_validate(data).assistant
        except ValidationError as exc:
            raise ResponseFormatError(
                f"unexpected API response format: {exc.error_count()} error(s)"
            ) from exc

    async def _post(self, session: aiohttp.ClientSession, body: dict) -> object:
        try:
            async with session.post(
                self.url,
                params={"model": self._model},
                json=body,
                timeout=self._timeout,
            ) as resp:
                if resp.status >= 400:
                    detail = (await resp.text())[:200]
                    raise RemoteRequestError(f"Q&A service returned HTTP {resp.status}: {detail}")
                return await resp.json(content_type=None)
        except asyncio.TimeoutError as exc:
            raise RemoteRequestError(f"Q&A request timed out after {self._timeout.total}s") from exc
        except aiohttp.ClientError as exc:
            raise RemoteRequestError(f"error making API request: {exc}") from exc
        except ValueError as exc:
            raise RemoteRequestError(f"error decoding API response: {exc}") from exc
