"""
LLM gateway client.

Talks to an OpenAI-compatible chat completions endpoint. Failures are
classified by status so callers can tell rate limiting and exhausted credits
apart from everything else.
"""

import logging
import time

import httpx

from matchcast.config import get_settings
from matchcast.exceptions import (
    ConfigurationError,
    LLMError,
    QuotaExhaustedError,
    RateLimitedError,
)

logger = logging.getLogger(__name__)


class LLMClient:
    """Async client for the chat completions gateway."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.api_key = (api_key or settings.llm_api_key or "").strip()
        if not self.api_key:
            raise ConfigurationError("LLM_API_KEY is not configured")

        self.model = model or settings.llm_model
        self.url = f"{settings.llm_base_url.rstrip('/')}/chat/completions"
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.llm_timeout),
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def close(self):
        """Close HTTP client."""
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def complete(self, messages: list[dict[str, str]]) -> str:
        """
        Request a single completion.

        Args:
            messages: Role-tagged messages, e.g. [{"role": "system", "content": ...}]

        Returns:
            Completion text

        Raises:
            RateLimitedError: gateway answered 429
            QuotaExhaustedError: gateway answered 402
            LLMError: any other failure, including an empty completion
        """
        payload = {"model": self.model, "messages": messages}
        start_time = time.monotonic()

        try:
            response = await self._client.post(self.url, json=payload)
        except httpx.TimeoutException as e:
            raise LLMError("LLM request timed out") from e
        except httpx.HTTPError as e:
            raise LLMError(f"LLM request failed: {e}") from e

        elapsed_ms = int((time.monotonic() - start_time) * 1000)

        if response.status_code == 429:
            raise RateLimitedError("Rate limit exceeded, try again later", upstream_status=429)
        if response.status_code == 402:
            raise QuotaExhaustedError("LLM credits exhausted", upstream_status=402)
        if response.status_code != 200:
            error_text = response.text[:500]
            logger.error(f"LLM error {response.status_code}: {error_text}")
            raise LLMError(
                f"LLM error: {response.status_code}", upstream_status=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LLMError("LLM returned invalid JSON") from e

        text = self._extract_text(data)
        if not text:
            raise LLMError("LLM returned an empty completion")

        logger.debug(f"LLM completion in {elapsed_ms}ms: {text[:200]!r}")
        return text

    def _extract_text(self, data: dict) -> str:
        choices = data.get("choices") or []
        if not choices:
            return ""
        message = choices[0].get("message") or {}
        return message.get("content") or ""
