"""
Utility functions for completion responses.

Text extraction and JSON-friendly dumps for debug output.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def extract_text_from_content(content: Any) -> str:
    """
    Extract text from content (handles both string and list-of-parts formats).
    """
    if isinstance(content, str):
        return content
    elif isinstance(content, list):
        text_parts = []
        for item in content:
            if isinstance(item, dict) and item.get("type") == "text":
                text_parts.append(item.get("text", ""))
        return " ".join(text_parts)
    else:
        return str(content)


def to_jsonable(value: Any) -> Any:
    """Plain data for SDK objects (pydantic models), lists and dicts."""
    if hasattr(value, "model_dump"):
        return value.model_dump()
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if hasattr(value, "__dict__"):
        return {k: to_jsonable(v) for k, v in vars(value).items()}
    return str(value)
