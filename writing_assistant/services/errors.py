"""Exceptions raised by the AI provider services."""
from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Required provider configuration is missing or unusable."""


class ProviderError(RuntimeError):
    """An upstream model call failed for a provider operation."""


__all__ = ["ConfigurationError", "ProviderError"]
