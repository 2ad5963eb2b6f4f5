"""
Command synthesis for Shell AI.

Fills the prompt template, sends one completion request, and returns a
classified result holding the candidate shell command.
"""

import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from .errors import CompletionError
from .llm.completion import CompletionResult, EmptyResponse, Success, classify_response
from .llm.providers import BaseProvider
from .llm.utils import to_jsonable
from .prompts import build_prompt
from .system_info import SystemInfo

logger = logging.getLogger(__name__)

# Debug log directory
_DEBUG_LOG_DIR = Path.home() / ".local" / "share" / "shell-ai"
_DEBUG_LOG_FILE = _DEBUG_LOG_DIR / "debug.log"


def _debug_log(label: str, data: Any, enabled: bool) -> None:
    """Append a timestamped entry to the debug log file."""
    if not enabled:
        return
    try:
        _DEBUG_LOG_DIR.mkdir(parents=True, exist_ok=True)
        with open(_DEBUG_LOG_FILE, "a") as f:
            ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            f.write(f"\n{'='*72}\n")
            f.write(f"[{ts}] {label}\n")
            f.write(f"{'='*72}\n")
            if isinstance(data, (dict, list)):
                f.write(json.dumps(data, indent=2, default=str))
            else:
                f.write(str(data))
            f.write("\n")
    except OSError as e:
        logger.debug(f"Debug log unavailable: {e}")


def build_request(prompt: str, template: str, system_info: SystemInfo) -> str:
    """Full prompt text sent to the model."""
    return build_prompt(
        template,
        shell=system_info.shell,
        os_info=system_info.operating_system,
        prompt=prompt,
    )


async def request_command(
    full_prompt: str,
    provider: BaseProvider,
    debug: bool = False,
) -> CompletionResult:
    """
    Send the prompt and classify the response.

    Args:
        full_prompt: Filled template
        provider: Completion provider (not yet initialized)
        debug: Also append request and response to the debug log

    Returns:
        Success with a cleaned command, EmptyResponse or MalformedResponse

    Raises:
        CompletionError: the client could not be set up or the call failed
    """
    if not await provider.initialize():
        raise CompletionError(f"Could not initialize {provider}")

    _debug_log("REQUEST", {"model": provider.model, "prompt": full_prompt}, debug)

    try:
        response = await provider.complete(provider.user_message(full_prompt))
    except CompletionError as e:
        _debug_log("ERROR", str(e), debug)
        raise
    finally:
        await provider.cleanup()

    _debug_log("RESPONSE", to_jsonable(response), debug)

    result = classify_response(response)
    if isinstance(result, Success):
        command = _clean_command(result.command)
        if not command:
            return EmptyResponse(result.raw)
        return Success(command, result.raw)
    return result


def synthesize(full_prompt: str, provider: BaseProvider, debug: bool = False) -> CompletionResult:
    """Blocking wrapper around request_command."""
    return asyncio.run(request_command(full_prompt, provider, debug=debug))


def _clean_command(text: str) -> str:
    """
    Clean LLM output to ensure it's a bare command.
    Strip markdown fences, backticks and prompt markers.
    """
    text = text.strip()

    # Remove code block wrappers
    if text.startswith("```") and text.endswith("```"):
        lines = text.split("\n")
        lines = lines[1:-1] if len(lines) > 2 else [text.strip("`")]
        text = "\n".join(lines).strip()

    # Remove single-line backtick wrapping
    if text.startswith("`") and text.endswith("`") and "\n" not in text:
        text = text.strip("`")

    # Remove leading "$ " prompt markers
    if text.startswith("$ "):
        text = text[2:]

    return text.strip()
