"""
Configuration for Shell AI LLM services.

Setting names, provider defaults, and loading of a project .env file
from the working directory into the process environment.
"""

import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Setting keys, both as environment variables and as stored keys
API_KEY_NAME = "OPENAI_KEY"
MODEL_NAME = "OPENAI_MODEL"

# Endpoint override for OpenAI-compatible servers
BASE_URL_ENV = "OPENAI_BASE_URL"

# Timeouts (fast for CLI use)
DEFAULT_TIMEOUT = 30


def load_environment(cwd: Optional[Path] = None) -> bool:
    """
    Load ./.env into os.environ without overriding variables already set.

    Returns True if a file was loaded.
    """
    env_path = (cwd or Path.cwd()) / ".env"
    if not env_path.exists():
        logger.debug(".env not found; using environment variables if set.")
        return False

    load_dotenv(dotenv_path=env_path, override=False)
    logger.debug(f"Loaded .env from {env_path}")
    return True


def base_url(configured: Optional[str] = None) -> Optional[str]:
    """Endpoint to use: environment first, then config.toml, else the SDK default."""
    return os.getenv(BASE_URL_ENV) or configured
