"""
Setting resolution for Shell AI.

A setting comes from the live process environment when it is set there,
otherwise from the persisted repository. Nothing is cached: every call
looks again.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

from .errors import MissingSettingError
from .store.repositories import BaseRepository

logger = logging.getLogger(__name__)


class SettingSource(str, Enum):
    ENVIRONMENT = "environment"
    REPOSITORY = "repository"


@dataclass(frozen=True)
class Found:
    value: str
    source: SettingSource

    def __bool__(self) -> bool:
        # an empty string is still a value
        return True


@dataclass(frozen=True)
class NotFound:
    key: str

    def __bool__(self) -> bool:
        return False


Resolution = Union[Found, NotFound]


class SettingsResolver:
    """Environment-over-repository lookup."""

    def __init__(self, repository: BaseRepository, environ: Optional[Mapping[str, str]] = None):
        self.repository = repository
        self.environ = os.environ if environ is None else environ

    def resolve(self, key: str) -> Resolution:
        value = self.environ.get(key)
        if value is not None:
            logger.debug(f"{key} resolved from environment")
            return Found(value, SettingSource.ENVIRONMENT)

        value = self.repository.get(key)
        if value is not None:
            logger.debug(f"{key} resolved from {self.repository.describe()}")
            return Found(value, SettingSource.REPOSITORY)

        logger.debug(f"{key} not set")
        return NotFound(key)

    def require(self, key: str, remedy: str, label: Optional[str] = None) -> str:
        """Resolved value, or MissingSettingError telling the user how to set it."""
        result = self.resolve(key)
        if isinstance(result, NotFound):
            raise MissingSettingError(key, remedy, label)
        return result.value
