"""Tests for prompt templating and bundled assets."""

import json

import pytest

from shell_ai import assets
from shell_ai.errors import AssetError
from shell_ai.paths import AppPaths
from shell_ai.prompts import build_prompt, replace_text


class TestTemplate:
    """Placeholders are replaced literally."""

    def test_basic_substitution(self):
        template = "Shell={SHELL} OS={OS} Ask={PROMPT}"
        assert build_prompt(template, "zsh", "darwin", "list files") == "Shell=zsh OS=darwin Ask=list files"

    def test_replaces_every_occurrence(self):
        assert build_prompt("{OS} and {OS}", "bash", "linux", "x") == "linux and linux"

    def test_regex_characters_in_prompt(self):
        prompt = r"find *.py | grep -E '^a.+$' \1 \g<0> $1"
        result = build_prompt("Ask={PROMPT}", "bash", "linux", prompt)
        assert result == f"Ask={prompt}"

    def test_inserted_values_are_not_rescanned(self):
        result = build_prompt("{PROMPT} on {OS}", "bash", "linux", "what is {OS}?")
        assert result == "what is {OS}? on linux"

    def test_token_with_metacharacters(self):
        assert replace_text("a.b a.b axb", {"a.b": "Z"}) == "Z Z axb"

    def test_no_replacements(self):
        assert replace_text("{SHELL}", {}) == "{SHELL}"


class TestAssets:

    def test_list_models(self, paths):
        assert assets.list_models(paths) == ["gpt-4o-mini", "gpt-4o"]

    def test_missing_list_field(self, paths):
        paths.models_file.write_text(json.dumps({"other": 1}))
        assert assets.list_models(paths) == []

    def test_missing_catalog_raises(self, paths):
        paths.models_file.unlink()
        with pytest.raises(AssetError, match="Models file not found"):
            assets.list_models(paths)

    def test_malformed_catalog_raises(self, paths):
        paths.models_file.write_text("{")
        with pytest.raises(AssetError):
            assets.list_models(paths)

    def test_missing_template_raises(self, paths):
        paths.prompt_file.unlink()
        with pytest.raises(AssetError, match="prompt template"):
            assets.load_prompt_template(paths)

    def test_bundled_assets(self):
        paths = AppPaths.default()
        assert assets.list_models(paths)
        template = assets.load_prompt_template(paths)
        for token in ("{SHELL}", "{OS}", "{PROMPT}"):
            assert token in template


class TestAppPaths:

    def test_config_dir_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SHELL_AI_CONFIG_DIR", str(tmp_path))
        paths = AppPaths.default()
        assert paths.env_file == tmp_path / ".env"
        assert paths.json_file == tmp_path / "settings.json"
        assert paths.config_file == tmp_path / "config.toml"
