"""
Exception types for Shell AI.

Everything raised on purpose derives from ShellAIError so the dispatcher
in main.py can report it and exit with status 1.
"""

from typing import Optional


class ShellAIError(Exception):
    """Base class for expected, reportable failures."""


class MissingSettingError(ShellAIError):
    """A required setting is absent from both the environment and the store."""

    def __init__(self, key: str, remedy: str, label: Optional[str] = None):
        super().__init__(f"{label or key} not found")
        self.key = key
        self.remedy = remedy


class AssetError(ShellAIError):
    """A bundled static file (model catalog, prompt template) is unusable."""


class StoreError(ShellAIError):
    """The settings store could not be read or written."""


class CompletionError(ShellAIError):
    """The completion API call failed."""
