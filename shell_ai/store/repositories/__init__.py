"""Settings repository implementations for Shell AI."""

from .base_repository import BaseRepository
from .env_repository import EnvFileRepository
from .json_repository import JsonFileRepository

__all__ = ["BaseRepository", "EnvFileRepository", "JsonFileRepository"]
