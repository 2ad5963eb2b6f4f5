"""
JSON document repository.

Stores settings as a flat JSON object, pretty-printed with 4-space
indentation. Existing keys keep their position; new keys are appended.
"""

import json
import logging
from typing import Dict, Optional

from .base_repository import BaseRepository
from ...errors import StoreError

logger = logging.getLogger(__name__)


class JsonFileRepository(BaseRepository):
    """Settings kept in a JSON file."""

    def _load(self) -> Dict[str, str]:
        text = self._read_text()
        # an empty file is an empty document, same as a missing one
        if text is None or not text.strip():
            return {}

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StoreError(f"Invalid JSON in {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Invalid settings in {self.path}: expected a JSON object")
        return data

    def upsert(self, key: str, value: str) -> None:
        data = self._load()
        # dicts keep insertion order, so an existing key is updated in place
        data[key] = value
        self._write_text(json.dumps(data, indent=4))
        logger.debug(f"Stored {key} in {self.path}")

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        if value is None:
            return None
        return str(value)
