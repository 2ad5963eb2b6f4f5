"""
Line codec for the dotenv-style settings file.

The file is a flat list of KEY="VALUE" lines. Blank lines are kept as-is
because upserts reuse them as insertion slots, so parsing never trims or
validates anything.
"""

from typing import List, Optional


def parse(text: str) -> List[str]:
    """Split file content into lines. serialize(parse(text)) == text."""
    return text.split("\n")


def serialize(lines: List[str]) -> str:
    """Join lines back into file content."""
    return "\n".join(lines)


def find_key_line(lines: List[str], key: str) -> Optional[int]:
    """Index of the line assigning `key`, or None.

    Only an exact `key=` prefix matches, so OPENAI_KEY never matches
    OPENAI_KEY_OLD or OPENAI.
    """
    prefix = f"{key}="
    for index, line in enumerate(lines):
        if line.startswith(prefix):
            return index
    return None


def find_first_blank_line(lines: List[str]) -> Optional[int]:
    """Index of the first empty line, or None."""
    for index, line in enumerate(lines):
        if line == "":
            return index
    return None


def format_entry(key: str, value: str) -> str:
    return f'{key}="{value}"'


def parse_value(line: str, key: str) -> str:
    """Value part of a `key=...` line with one pair of wrapping quotes removed."""
    raw = line[len(key) + 1:]
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ('"', "'"):
        return raw[1:-1]
    return raw
