"""
Loaders for the static files shipped in shell_ai/settings/.
"""

import json
import logging
from typing import List

from .errors import AssetError
from .paths import AppPaths

logger = logging.getLogger(__name__)


def list_models(paths: AppPaths) -> List[str]:
    """Model names from the catalog, in file order."""
    path = paths.models_file
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise AssetError("Models file not found!") from e
    except (OSError, json.JSONDecodeError) as e:
        raise AssetError(f"Cannot read models file {path}: {e}") from e

    if not isinstance(data, dict):
        raise AssetError(f"Invalid models file {path}: expected a JSON object")

    models = data.get("list") or []
    logger.debug(f"Loaded {len(models)} models from {path}")
    return [str(m) for m in models]


def load_prompt_template(paths: AppPaths) -> str:
    path = paths.prompt_file
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise AssetError(f"Cannot read prompt template {path}: {e}") from e
