"""Claude configuration read lazily from the environment."""
from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_MAX_TOKENS = 4096
DEFAULT_TEMPERATURE = 0.7


@dataclass(frozen=True)
class ClaudeSettings:
    api_key: str
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE


_settings: Optional[ClaudeSettings] = None
_settings_lock = threading.Lock()


def settings_from_env() -> ClaudeSettings:
    """Read Claude settings from environment variables (and a local .env)."""

    load_dotenv()

    api_key = (os.getenv("CLAUDE_API_KEY") or "").strip()
    if not api_key:
        raise ConfigurationError("CLAUDE_API_KEY environment variable is required")

    model = (os.getenv("CLAUDE_MODEL") or "").strip() or DEFAULT_MODEL

    max_tokens_raw = os.getenv("CLAUDE_MAX_TOKENS", str(DEFAULT_MAX_TOKENS))
    temperature_raw = os.getenv("CLAUDE_TEMPERATURE", str(DEFAULT_TEMPERATURE))

    try:
        max_tokens = int(max_tokens_raw)
    except ValueError:
        logger.warning("Invalid CLAUDE_MAX_TOKENS %r, using default %s", max_tokens_raw, DEFAULT_MAX_TOKENS)
        max_tokens = DEFAULT_MAX_TOKENS

    try:
        temperature = float(temperature_raw)
    except ValueError:
        logger.warning(
            "Invalid CLAUDE_TEMPERATURE %r, using default %s", temperature_raw, DEFAULT_TEMPERATURE
        )
        temperature = DEFAULT_TEMPERATURE

    return ClaudeSettings(
        api_key=api_key,
        model=model,
        max_tokens=max_tokens,
        temperature=temperature,
    )


def get_settings() -> ClaudeSettings:
    """Return the process-wide settings, resolving them on first use."""

    global _settings
    if _settings is not None:
        return _settings
    with _settings_lock:
        if _settings is None:
            _settings = settings_from_env()
    return _settings


def reset_settings() -> None:
    global _settings
    with _settings_lock:
        _settings = None


__all__ = [
    "ClaudeSettings",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_MODEL",
    "DEFAULT_TEMPERATURE",
    "get_settings",
    "reset_settings",
    "settings_from_env",
]
