"""
Completion results.

A raw API response is classified once into Success, EmptyResponse or
MalformedResponse. Callers match on the type instead of indexing into
the response themselves.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Union

from .utils import extract_text_from_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    command: str
    raw: Any = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class EmptyResponse:
    raw: Any = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class MalformedResponse:
    reason: str
    raw: Any = field(default=None, repr=False, compare=False)


CompletionResult = Union[Success, EmptyResponse, MalformedResponse]


def classify_response(response: Any) -> CompletionResult:
    """Pick the first choice's message content out of a chat completion."""
    choices = getattr(response, "choices", None)
    if choices is None:
        return MalformedResponse("response has no choices field", response)
    if not isinstance(choices, (list, tuple)):
        return MalformedResponse("choices is not a list", response)
    if not choices:
        return EmptyResponse(response)

    message = getattr(choices[0], "message", None)
    if message is None:
        return MalformedResponse("first choice has no message", response)

    content = getattr(message, "content", None)
    if content is None:
        return EmptyResponse(response)

    text = extract_text_from_content(content)
    if not text.strip():
        return EmptyResponse(response)

    return Success(text, response)
