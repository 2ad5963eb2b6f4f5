"""
OpenAI Provider Implementation.

Chat completions through the official SDK. Works with any
OpenAI-compatible endpoint when base_url is given.
"""

import logging
from typing import Dict, List, Any

from openai import AsyncOpenAI, OpenAIError

from .base_provider import BaseProvider
from ...errors import CompletionError

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseProvider):
    """Provider using the OpenAI chat completions API."""

    def __init__(self, api_key: str, model: str, timeout: float = 30.0, **kwargs):
        super().__init__(api_key, model, timeout, **kwargs)
        self.base_url = kwargs.get("base_url")

    async def initialize(self) -> bool:
        """Initialize the OpenAI client."""
        try:
            self.client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        except OpenAIError as e:
            logger.error(f"Failed to initialize OpenAI client: {e}")
            return False
        logger.debug(f"Initialized OpenAI client with model: {self.model}")
        return True

    async def complete(self, messages: List[Dict[str, Any]], **kwargs) -> Any:
        """
        Send a single chat completion request.

        Raises:
            CompletionError: on any transport or API error.
        """
        if not self.client:
            raise RuntimeError("OpenAI client not initialized. Call initialize() first.")

        chat_params = {
            "model": self.model,
            "messages": messages,
            **kwargs,
        }
        logger.debug(f"OpenAI request: model={self.model}")

        try:
            return await self.client.chat.completions.create(**chat_params)
        except OpenAIError as e:
            logger.debug(f"OpenAI request failed: {e}")
            raise CompletionError(str(e)) from e

    async def cleanup(self):
        """Clean up OpenAI client resources."""
        if self.client:
            await self.client.close()
        self.client = None
