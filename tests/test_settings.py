"""Tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from textfully import TextfullyClient, TextfullySettings, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("TEXTFULLY_API_KEY", "TEXTFULLY_BASE_URL", "TEXTFULLY_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TEXTFULLY_API_KEY", "tx_from_env")
        monkeypatch.setenv("TEXTFULLY_BASE_URL", "http://localhost:9000/v1")
        monkeypatch.setenv("TEXTFULLY_TIMEOUT", "5")

        config = load_config(env_file=None)

        assert config.api_key == "tx_from_env"
        assert config.base_url == "http://localhost:9000/v1"
        assert config.timeout == 5.0

    def test_defaults_when_unset(self):
        config = load_config(env_file=None)

        assert config.api_key == ""
        assert config.base_url == "https://api.textfully.dev/v1"
        assert config.timeout == 30.0

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TEXTFULLY_API_KEY=tx_from_file\nUNRELATED=1\n")

        config = load_config(env_file=str(env_file))

        assert config.api_key == "tx_from_file"

    def test_environment_overrides_env_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch):
        env_file = tmp_path / ".env"
        env_file.write_text("TEXTFULLY_API_KEY=tx_from_file\n")
        monkeypatch.setenv("TEXTFULLY_API_KEY", "tx_from_env")

        assert load_config(env_file=str(env_file)).api_key == "tx_from_env"

    def test_missing_env_file_is_ignored(self, tmp_path):
        assert load_config(env_file=str(tmp_path / "missing.env")).api_key == ""

    def test_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TEXTFULLY_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            TextfullySettings(_env_file=None)

    def test_unset_key_yields_configuration_error_on_send(self):
        with TextfullyClient(load_config(env_file=None)) as client:
            result = client.send("+16175555555", "hello")

        assert not result.succeeded
        assert result.error.kind.value == "configuration"
