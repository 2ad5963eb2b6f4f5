"""
Dotenv-style repository.

Stores settings as KEY="VALUE" lines. Upserts keep every other line
untouched and in order; a new key lands in the first blank line if
there is one, otherwise at the end.
"""

import logging
from typing import Optional

from .base_repository import BaseRepository
from .. import codec

logger = logging.getLogger(__name__)


class EnvFileRepository(BaseRepository):
    """Settings kept in a `.env` file."""

    def upsert(self, key: str, value: str) -> None:
        entry = codec.format_entry(key, value)

        if not self.exists():
            logger.debug(f"Creating {self.path} with {key}")
            self._write_text(entry)
            return

        lines = codec.parse(self._read_text() or "")

        index = codec.find_key_line(lines, key)
        if index is None:
            index = codec.find_first_blank_line(lines)
            if index is None:
                lines.append(entry)
                logger.debug(f"Appended {key} to {self.path}")
            else:
                lines[index] = entry
                logger.debug(f"Inserted {key} at blank line {index}")
        else:
            lines[index] = entry
            logger.debug(f"Updated {key} at line {index}")

        self._write_text(codec.serialize(lines))

    def get(self, key: str) -> Optional[str]:
        text = self._read_text()
        if text is None:
            return None

        lines = codec.parse(text)
        index = codec.find_key_line(lines, key)
        if index is None:
            return None
        return codec.parse_value(lines[index], key)
