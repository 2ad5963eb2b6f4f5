"""Tests for environment-over-repository setting resolution."""

from unittest.mock import MagicMock

import pytest

from shell_ai.errors import MissingSettingError
from shell_ai.resolver import Found, NotFound, SettingSource, SettingsResolver
from shell_ai.store.repositories import EnvFileRepository


@pytest.fixture
def repo(tmp_path):
    return EnvFileRepository(tmp_path / ".env")


class TestPrecedence:

    def test_environment_wins_over_repository(self, repo):
        repo.upsert("OPENAI_KEY", "stored")
        resolver = SettingsResolver(repo, environ={"OPENAI_KEY": "from-env"})

        assert resolver.resolve("OPENAI_KEY") == Found("from-env", SettingSource.ENVIRONMENT)

    def test_environment_short_circuits_repository(self):
        repo = MagicMock()
        resolver = SettingsResolver(repo, environ={"OPENAI_KEY": "from-env"})

        resolver.resolve("OPENAI_KEY")

        repo.get.assert_not_called()

    def test_empty_environment_value_still_wins(self, repo):
        repo.upsert("OPENAI_KEY", "stored")
        resolver = SettingsResolver(repo, environ={"OPENAI_KEY": ""})

        result = resolver.resolve("OPENAI_KEY")

        assert result == Found("", SettingSource.ENVIRONMENT)
        assert result

    def test_falls_back_to_repository(self, repo):
        repo.upsert("OPENAI_MODEL", "gpt-4o")
        resolver = SettingsResolver(repo, environ={})

        assert resolver.resolve("OPENAI_MODEL") == Found("gpt-4o", SettingSource.REPOSITORY)

    def test_not_found(self, repo):
        resolver = SettingsResolver(repo, environ={})

        result = resolver.resolve("OPENAI_KEY")

        assert result == NotFound("OPENAI_KEY")
        assert not result

    def test_uses_process_environment_by_default(self, repo, monkeypatch):
        monkeypatch.setenv("OPENAI_KEY", "live")
        assert SettingsResolver(repo).resolve("OPENAI_KEY").value == "live"

    def test_not_cached_between_calls(self, repo):
        environ = {}
        resolver = SettingsResolver(repo, environ=environ)
        assert isinstance(resolver.resolve("OPENAI_KEY"), NotFound)

        repo.upsert("OPENAI_KEY", "sk-1")

        assert resolver.resolve("OPENAI_KEY") == Found("sk-1", SettingSource.REPOSITORY)


class TestRequire:

    def test_returns_value(self, repo):
        resolver = SettingsResolver(repo, environ={"OPENAI_KEY": "sk-1"})
        assert resolver.require("OPENAI_KEY", "shell-ai apikey --set <value>") == "sk-1"

    def test_missing_raises_with_remedy(self, repo):
        resolver = SettingsResolver(repo, environ={})

        with pytest.raises(MissingSettingError) as exc_info:
            resolver.require("OPENAI_KEY", "shell-ai apikey --set <value>", label="API key")

        assert str(exc_info.value) == "API key not found"
        assert exc_info.value.remedy == "shell-ai apikey --set <value>"
