"""
Base Repository Abstract Class for persisted settings.

A repository holds the settings that survive between invocations.
Subclasses decide the on-disk format; all of them rewrite the whole
file on every upsert.
"""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ...errors import StoreError

logger = logging.getLogger(__name__)


class BaseRepository(ABC):
    """
    Abstract base class for settings repositories.

    Contract:
    - upsert(key, value): create or update one entry, then flush the file
    - get(key): the stored value, or None if the key (or the file) is absent

    A missing file is always treated as an empty document.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    @abstractmethod
    def upsert(self, key: str, value: str) -> None:
        """Insert or update `key` and persist the document."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value for `key`, or None."""
        pass

    def exists(self) -> bool:
        return self.path.exists()

    def _read_text(self) -> Optional[str]:
        """File content, or None when there is no file yet."""
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StoreError(f"Cannot read {self.path}: {e}") from e

    def _write_text(self, content: str) -> None:
        """Replace the file content atomically (temp file + rename)."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        except OSError as e:
            raise StoreError(f"Cannot write {self.path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StoreError(f"Cannot write {self.path}: {e}") from e
        logger.debug(f"Wrote {len(content)} bytes to {self.path}")

    def describe(self) -> str:
        return str(self.path)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(path='{self.path}')"
