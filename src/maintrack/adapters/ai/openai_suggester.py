"""
OpenAI suggester adapter.

Sends the maintenance prompt to an OpenAI-compatible chat completions
endpoint. Any OpenAI-compatible server works through ``base_url``.

Errors and timeouts are raised to the caller; the suggestions component
turns them into its fallback answer.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from openai import AsyncOpenAI

logger = logging.getLogger(__name__)


class OpenAISuggester:
    """SuggesterPort backed by ``openai.AsyncOpenAI``."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        base_url: str | None = None,
        timeout_seconds: float = 20.0,
        max_tokens: int = 600,
        temperature: float = 0.2,
        client: Any | None = None,
    ):
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.max_tokens = max_tokens
        self.temperature = temperature

        if client is None:
            client_kwargs: dict[str, Any] = {"api_key": api_key}
            if base_url:
                client_kwargs["base_url"] = base_url
            client = AsyncOpenAI(**client_kwargs)
        self._client = client

    async def complete(self, prompt: str) -> str:
        response = await asyncio.wait_for(
            self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            ),
            timeout=self.timeout_seconds,
        )
        content = response.choices[0].message.content or ""
        logger.debug("Model %s answered with %d characters", self.model, len(content))
        return content.strip()
