"""Shared fixtures."""

import json

import pytest

from shell_ai import config_file
from shell_ai.paths import AppPaths


@pytest.fixture(autouse=True)
def reset_config():
    """Reset config state before each test."""
    config_file.reset()
    yield
    config_file.reset()


@pytest.fixture
def paths(tmp_path):
    """AppPaths with a private assets dir and config dir."""
    assets_dir = tmp_path / "assets"
    assets_dir.mkdir()
    (assets_dir / "models.json").write_text(json.dumps({"list": ["gpt-4o-mini", "gpt-4o"]}))
    (assets_dir / "prompt.txt").write_text("Shell={SHELL} OS={OS} Ask={PROMPT}")
    return AppPaths(assets_dir=assets_dir, config_dir=tmp_path / "config")
