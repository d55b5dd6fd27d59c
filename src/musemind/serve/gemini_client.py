"""Client for the Gemini generateContent endpoint.

One POST per call, no retries. The configured timeout bounds the whole
exchange, not just individual socket reads.
"""
from __future__ import annotations
import asyncio
import logging
from typing import Any

import httpx

from musemind.common.config import Settings
from musemind.poem.errors import (
    ConfigurationError,
    UnexpectedUpstreamShape,
    UpstreamError,
    UpstreamTimeout,
    UpstreamUnreachable,
)

LOGGER = logging.getLogger("musemind.gemini")


class GeminiClient:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = settings
        self._transport = transport

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self.settings.generation.to_payload(),
        }

    async def generate_content(self, prompt: str) -> Any:
        """
        Send the prompt upstream and return the parsed JSON body.

        Args:
            prompt: Fully rendered prompt text.

        Raises:
            ConfigurationError: no API key configured; nothing is sent.
            UpstreamTimeout: the deadline passed before a response arrived.
            UpstreamUnreachable: transport failure without a response.
            UpstreamError: non-2xx response, carrying its status.
            UnexpectedUpstreamShape: 2xx response whose body is not JSON.
        """
        if not self.settings.has_api_key:
            LOGGER.error("GEMINI_API_KEY not configured; refusing to call upstream")
            raise ConfigurationError("GEMINI_API_KEY is not set")

        timeout = self.settings.request_timeout
        try:
            return await asyncio.wait_for(self._post(prompt, timeout), timeout=timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            LOGGER.error("Gemini request timed out after %ss", timeout)
            raise UpstreamTimeout(f"No response within {timeout}s") from e
        except httpx.RequestError as e:
            LOGGER.error("Gemini request failed: %s", type(e).__name__)
            raise UpstreamUnreachable(str(e)) from e

    async def _post(self, prompt: str, timeout: float) -> Any:
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.settings.gemini_api_key,
        }
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            r = await client.post(self.settings.gemini_base_url, headers=headers, json=self.build_payload(prompt))
        if not r.is_success:
            LOGGER.error("Gemini returned HTTP %s", r.status_code)
            raise UpstreamError(r.status_code)
        try:
            return r.json()
        except ValueError as e:
            LOGGER.error("Gemini returned a non-JSON body")
            raise UnexpectedUpstreamShape("Upstream body is not JSON") from e
