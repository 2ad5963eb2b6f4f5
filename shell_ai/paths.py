"""
Filesystem locations used by Shell AI.

Built once in main() and handed to whatever needs a path, so nothing
reaches for a global root directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path

ASSETS_DIR = Path(__file__).parent / "settings"
CONFIG_DIR = Path.home() / ".config" / "shell-ai"


@dataclass(frozen=True)
class AppPaths:
    assets_dir: Path
    config_dir: Path

    @classmethod
    def default(cls) -> "AppPaths":
        """Bundled assets plus ~/.config/shell-ai (or $SHELL_AI_CONFIG_DIR)."""
        config_dir = os.environ.get("SHELL_AI_CONFIG_DIR")
        return cls(
            assets_dir=ASSETS_DIR,
            config_dir=Path(config_dir) if config_dir else CONFIG_DIR,
        )

    @property
    def models_file(self) -> Path:
        return self.assets_dir / "models.json"

    @property
    def prompt_file(self) -> Path:
        return self.assets_dir / "prompt.txt"

    @property
    def env_file(self) -> Path:
        return self.config_dir / ".env"

    @property
    def json_file(self) -> Path:
        return self.config_dir / "settings.json"

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.toml"
