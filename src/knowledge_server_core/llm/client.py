"""Gemini generateContent client used to answer questions."""

from typing import Any, Dict, List, Optional

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ..exceptions import AnswerError
from .prompts import build_prompt

NO_ANSWER = "No answer generated."


def is_transient(error: BaseException) -> bool:
    """Whether a failed request should be sent again (transport failure, 429 or 5xx)"""
    if isinstance(error, httpx.RequestError):
        return True
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return status == 429 or status >= 500
    return False


class GeminiClient:
    """Sends one prompt to Gemini and returns the first candidate's text"""

    def __init__(
        self,
        config: Dict[str, Any],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = config.get("api_key")
        self.model = config.get("model", "gemini-pro")
        self.endpoint = config.get("endpoint", "https://generativelanguage.googleapis.com/v1beta/models").rstrip("/")
        self.timeout = float(config.get("timeout", 60))
        self.max_retries = max(1, int(config.get("max_retries", 3)))
        self.retry_backoff = float(config.get("retry_backoff", 1))
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.endpoint}/{self.model}:generateContent"

    async def answer(self, question: str, contents: List[str]) -> str:
        """Build the prompt from stored knowledge and ask the model

        Raises:
            AnswerError: Missing API key, or the request failed after retries
        """
        if not self.api_key:
            raise AnswerError("GOOGLE_API_KEY is not set")

        prompt = build_prompt(contents, question)
        logger.info(f"Asking {self.model} with {len(contents)} knowledge entries ({len(prompt)} characters)")

        try:
            result = await self._generate(prompt)
        except httpx.HTTPStatusError as e:
            logger.error(f"LLM HTTP error: {e.response.status_code} - {e.response.reason_phrase}")
            raise AnswerError("AI request failed", details=f"HTTP {e.response.status_code}") from e
        except (httpx.RequestError, ValueError) as e:
            logger.error(f"LLM request error: {str(e)}")
            raise AnswerError("AI request failed", details=str(e)) from e

        return self._extract_answer(result)

    async def _generate(self, prompt: str) -> Dict[str, Any]:
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=self.retry_backoff, min=0, max=10),
            retry=retry_if_exception(is_transient),
            reraise=True,
        ):
            with attempt:
                async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                    response = await client.post(self.url, params={"key": self.api_key}, json=payload)
                    response.raise_for_status()
                    return response.json()

    def _extract_answer(self, result: Dict[str, Any]) -> str:
        try:
            text = result["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            logger.warning("LLM response has no candidate text")
            return NO_ANSWER
        return text or NO_ANSWER
