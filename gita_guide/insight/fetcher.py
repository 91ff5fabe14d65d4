from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict

import httpx

from gita_guide.core.constants import AppSettings, api_key_is_set
from gita_guide.insight.errors import (
    BackendError,
    ConfigurationError,
    EmptyResponseError,
)
from gita_guide.insight.extractor import extract
from gita_guide.insight.models import Insight, Prompt

logger = logging.getLogger(__name__)


class Endpoint(Enum):
    """Centralized API endpoint paths"""

    CHAT_COMPLETIONS = "/chat/completions"


MISSING_KEY_MESSAGE = (
    "Missing API key. Set GROQ_API_KEY in the environment or .env file."
)
EMPTY_RESPONSE_MESSAGE = "No response from the backend."


class InsightFetcher:
    """
    Client for a Groq (OpenAI-compatible) chat-completion endpoint.

    Features:
    - Explicit credential and model settings, no global lookups
    - Fails fast on a missing or placeholder credential
    - Exactly one request per fetch, no retries and no caching
    - Classified errors for every failure path
    - Async context manager support
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = AppSettings.GROQ_BASE_URL,
        model: str = AppSettings.GROQ_MODEL.value,
        temperature: float = AppSettings.GROQ_TEMPERATURE,
        timeout: float = AppSettings.REQUEST_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.timeout = httpx.Timeout(timeout)

        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=self.timeout)
        self._http_client = http_client

    @property
    def is_configured(self) -> bool:
        return api_key_is_set(self.api_key)

    def _payload(self, prompt: Prompt) -> Dict[str, Any]:
        return {
            "model": self.model,
            "temperature": self.temperature,
            "messages": prompt.messages,
        }

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Backend-provided error message, else a generic status message"""
        try:
            body = response.json()
        except (ValueError, RecursionError):
            body = None

        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict):
                message = error.get("message")
                if isinstance(message, str) and message:
                    return message

        return f"API Error: {response.status_code}"

    @staticmethod
    def _content(response: httpx.Response) -> str:
        """Generated text of the first choice"""
        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, RecursionError, KeyError, IndexError, TypeError) as e:
            raise EmptyResponseError(EMPTY_RESPONSE_MESSAGE) from e

        if not isinstance(content, str) or not content:
            raise EmptyResponseError(EMPTY_RESPONSE_MESSAGE)
        return content

    async def fetch(self, prompt: Prompt) -> Insight:
        """
        Ask the backend for one insight

        Raises:
            ConfigurationError: When no usable API key is set
            BackendError: On transport failures or non-success statuses
            EmptyResponseError: When the reply holds no generated content
            MalformedResponseError: When the content is not a JSON object
            IncompleteResponseError: When insight fields are missing
        """
        if not self.is_configured:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        logger.info(
            "Requesting insight | model=%s | query_chars=%d",
            self.model,
            len(prompt.query),
        )

        try:
            response = await self._http_client.post(
                f"{self.base_url}{Endpoint.CHAT_COMPLETIONS.value}",
                json=self._payload(prompt),
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        except httpx.RequestError as e:
            logger.warning("Backend request failed: %s", e)
            raise BackendError(
                f"Could not reach the backend: {e.__class__.__name__}") from e

        if not response.is_success:
            message = self._error_message(response)
            logger.warning(
                "Backend returned %d: %s", response.status_code, message)
            raise BackendError(message, status_code=response.status_code)

        return extract(self._content(response))

    async def aclose(self) -> None:
        """Close underlying HTTP client if this fetcher created it"""
        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> 'InsightFetcher':
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()
