from pathlib import Path

import pytest

from wordnik_client.config import DEFAULT_BASE_URL, ClientConfig, load_config
from wordnik_client.errors import ConfigError

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("WORDNIK_API_KEY", raising=False)
    monkeypatch.delenv("WORDNIK_BASE_URL", raising=False)


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig()
        assert config.api_key == ""
        assert config.base_url == DEFAULT_BASE_URL
        assert config.retain_responses is False
        assert config.collapse_false is True


class TestLoadConfig:
    def test_no_sources(self):
        assert load_config() == ClientConfig()

    def test_from_yaml(self):
        config = load_config(FIXTURES / "wordnik.yaml")
        assert config.api_key == "file-key"
        assert config.base_url == "http://localhost:8080"
        assert config.timeout == 3.5
        assert config.retain_responses is True

    def test_env_overrides_file(self, monkeypatch):
        monkeypatch.setenv("WORDNIK_API_KEY", "env-key")
        config = load_config(FIXTURES / "wordnik.yaml")
        assert config.api_key == "env-key"
        assert config.base_url == "http://localhost:8080"

    def test_explicit_override_wins(self, monkeypatch):
        monkeypatch.setenv("WORDNIK_API_KEY", "env-key")
        config = load_config(FIXTURES / "wordnik.yaml", api_key="arg-key")
        assert config.api_key == "arg-key"

    def test_none_override_ignored(self):
        config = load_config(FIXTURES / "wordnik.yaml", api_key=None, base_url=None)
        assert config.api_key == "file-key"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == ClientConfig()

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("api_key: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("timeout: soon\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)
