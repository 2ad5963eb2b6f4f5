"""
Base Provider Abstract Class for completion APIs.

Simplified for Shell AI: one user message in, one raw response out.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any
import logging

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """
    Abstract base class for all completion providers.

    A provider sends exactly one request per call and never retries;
    transport and API failures surface as CompletionError.
    """

    def __init__(self, api_key: str, model: str, timeout: float = 30.0, **kwargs):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.config = kwargs
        self.client = None

    @abstractmethod
    async def initialize(self) -> bool:
        """Initialize the provider client. Returns True on success."""
        pass

    @abstractmethod
    async def complete(self, messages: List[Dict[str, Any]], **kwargs) -> Any:
        """Send one chat completion request and return the raw response."""
        pass

    def user_message(self, content: str) -> List[Dict[str, Any]]:
        return [{"role": "user", "content": content}]

    async def cleanup(self):
        """Clean up resources."""
        if hasattr(self.client, "close") and self.client:
            await self.client.close()

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(model='{self.model}')"
