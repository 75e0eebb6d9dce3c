"""Thin wrapper around the Anthropic Messages API used by the provider."""
from __future__ import annotations

import logging
import math
import threading
import time
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from anthropic import AsyncAnthropic

from .models import AIProviderResponse, TokenUsage
from .prompts import HEALTH_CHECK_PROMPT
from .settings import ClaudeSettings, get_settings

logger = logging.getLogger(__name__)

CHARS_PER_TOKEN = 4
COST_PER_TOKEN = 0.000008


def estimate_token_usage(prompt: str, content: str) -> TokenUsage:
    """Approximate token usage from character counts (about 4 chars per token)."""

    total = math.ceil((len(prompt) + len(content)) / CHARS_PER_TOKEN)
    return TokenUsage(
        input_tokens=math.ceil(len(prompt) / CHARS_PER_TOKEN),
        output_tokens=math.ceil(len(content) / CHARS_PER_TOKEN),
        total_tokens=total,
        estimated_cost=total * COST_PER_TOKEN,
    )


def first_text_block(response: Any) -> Optional[str]:
    """Return the text of the first content block when it is a text block."""

    blocks = getattr(response, "content", None) or []
    if not blocks:
        return None
    block = blocks[0]
    if getattr(block, "type", None) != "text":
        return None
    return getattr(block, "text", None)


class ClaudeClient:
    """Performs single request/response round trips against Claude.

    Settings and the SDK client are resolved on first use rather than at
    construction, so a missing credential surfaces from the first call.
    """

    def __init__(
        self,
        *,
        settings_loader: Callable[[], ClaudeSettings] = get_settings,
        client: Optional[AsyncAnthropic] = None,
    ) -> None:
        self._settings_loader = settings_loader
        self._settings: Optional[ClaudeSettings] = None
        self._client = client
        self._init_lock = threading.Lock()
        self._initialized = False

    def initialize(self) -> ClaudeSettings:
        """Resolve settings and build the SDK client exactly once."""

        if self._initialized:
            return self._settings  # type: ignore[return-value]
        with self._init_lock:
            if not self._initialized:
                settings = self._settings_loader()
                if self._client is None:
                    self._client = AsyncAnthropic(api_key=settings.api_key)
                self._settings = settings
                self._initialized = True
                logger.info("Claude client initialized with model: %s", settings.model)
        return self._settings  # type: ignore[return-value]

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def call(self, prompt: str) -> AIProviderResponse:
        """Send one user prompt and return the text payload with usage estimates."""

        settings = self.initialize()
        started = time.perf_counter()

        response = await self._client.messages.create(  # type: ignore[union-attr]
            model=settings.model,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            messages=[{"role": "user", "content": prompt}],
        )

        content = first_text_block(response) or ""
        processing_time = (time.perf_counter() - started) * 1000

        return AIProviderResponse(
            content=content,
            token_usage=estimate_token_usage(prompt, content),
            model=settings.model,
            timestamp=datetime.now(timezone.utc),
            processing_time=processing_time,
        )

    async def health_check(self) -> bool:
        settings = self.initialize()
        try:
            response = await self._client.messages.create(  # type: ignore[union-attr]
                model=settings.model,
                max_tokens=10,
                temperature=0,
                messages=[{"role": "user", "content": HEALTH_CHECK_PROMPT}],
            )
            text = first_text_block(response)
        except Exception:
            logger.error("Claude health check failed", exc_info=True)
            return False

        return text is not None and "OK" in text


__all__ = ["ClaudeClient", "estimate_token_usage", "first_text_block"]
