"""
Provider Factory for Shell AI.

Creates completion provider instances based on configuration.
"""

import logging
from typing import Optional, Dict, Any

from .providers.base_provider import BaseProvider
from .providers.openai_provider import OpenAIProvider
from . import config

logger = logging.getLogger(__name__)


def create_provider(
    api_key: str,
    model: str,
    provider_config: Optional[Dict[str, Any]] = None,
) -> BaseProvider:
    """
    Create a completion provider instance.

    Args:
        api_key: API key for the provider
        model: Model name to use
        provider_config: Optional "timeout" and "base_url" (config.toml values)

    Returns:
        Configured provider instance (call initialize() before use)
    """
    provider_config = provider_config or {}

    provider = OpenAIProvider(
        api_key=api_key,
        model=model,
        timeout=provider_config.get("timeout") or config.DEFAULT_TIMEOUT,
        base_url=config.base_url(provider_config.get("base_url")),
    )
    logger.debug(f"Created provider {provider}")
    return provider
