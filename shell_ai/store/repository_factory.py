"""
Repository Factory for Shell AI.

Creates the settings repository selected in config.toml.
"""

import logging
from enum import Enum

from .repositories import BaseRepository, EnvFileRepository, JsonFileRepository
from ..paths import AppPaths

logger = logging.getLogger(__name__)


class StoreType(str, Enum):
    """Available settings backings."""
    ENV = "env"
    JSON = "json"


def create_repository(store_type: StoreType, paths: AppPaths) -> BaseRepository:
    """
    Create a settings repository.

    Args:
        store_type: Which backing to use
        paths: Application paths (the file lives in paths.config_dir)

    Returns:
        Repository instance; the file itself is created on first upsert
    """
    store_type = StoreType(store_type)

    if store_type == StoreType.ENV:
        repository = EnvFileRepository(paths.env_file)
    elif store_type == StoreType.JSON:
        repository = JsonFileRepository(paths.json_file)
    else:
        raise ValueError(f"Unknown store type: {store_type}")

    logger.debug(f"Using settings store {repository}")
    return repository
