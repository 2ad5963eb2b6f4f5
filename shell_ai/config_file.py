"""
Optional config file support for Shell AI.

Reads config.toml from the user config directory if it exists.
Missing config or invalid values fall back to defaults.
"""

import logging
import sys
import tomllib
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "backend": "env",
    "base_url": None,  # None means the OpenAI default endpoint
    "timeout": 30,
    "debug": False,
}

VALID_BACKENDS = {"env", "json"}

_config: Dict[str, Any] = {}
_loaded = False


def _warn(message: str) -> None:
    print(f"shell-ai: {message}", file=sys.stderr)


def _validate_int(value: Any, key: str, minimum: int = 1) -> int | None:
    """Validate an integer config value. Returns None if invalid."""
    if isinstance(value, bool):
        _warn(f"config '{key}' must be an integer, ignoring")
        return None
    try:
        val = int(value)
    except (TypeError, ValueError):
        _warn(f"config '{key}' must be an integer, ignoring")
        return None
    if val < minimum:
        _warn(f"config '{key}' must be >= {minimum}, ignoring")
        return None
    return val


def load_config(path: Path) -> Dict[str, Any]:
    """
    Load config from TOML file, merging with defaults.

    Returns a dict with keys: backend, base_url, timeout, debug.
    """
    global _config, _loaded

    if _loaded:
        return _config

    _config = dict(DEFAULTS)
    _loaded = True

    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return _config

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        _warn(f"error reading config: {e}")
        return _config

    # [store] section
    store_section = data.get("store", {})
    if isinstance(store_section, dict):
        backend = store_section.get("backend")
        if backend is not None:
            if backend in VALID_BACKENDS:
                _config["backend"] = backend
            else:
                _warn(f"unknown store backend '{backend}', ignoring")

    # [provider] section
    provider_section = data.get("provider", {})
    if isinstance(provider_section, dict):
        base_url = provider_section.get("base_url")
        if base_url is not None:
            if isinstance(base_url, str) and base_url.strip():
                _config["base_url"] = base_url.strip()
            else:
                _warn("config 'base_url' must be a non-empty string, ignoring")

        timeout = provider_section.get("timeout")
        if timeout is not None:
            val = _validate_int(timeout, "timeout")
            if val is not None:
                _config["timeout"] = val

    # [debug] section
    debug_section = data.get("debug", {})
    if isinstance(debug_section, dict):
        enabled = debug_section.get("enabled")
        if isinstance(enabled, bool):
            _config["debug"] = enabled

    logger.debug("Loaded config: %s", _config)
    return _config


def reset():
    """Reset loaded config (for testing)."""
    global _config, _loaded
    _config = {}
    _loaded = False
